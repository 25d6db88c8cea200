"""
Observability configuration settings.

Langfuse credentials for the stage prompt registry.

Dependencies: pydantic_settings
System role: Configuration for prompt versioning
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilitySettings(BaseSettings):
    """Langfuse connection and prompt registration settings."""

    model_config = SettingsConfigDict(
        env_prefix="LANGFUSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    langfuse_public_key: str | None = Field(default=None, alias="LANGFUSE_PUBLIC_KEY")
    langfuse_secret_key: str | None = Field(default=None, alias="LANGFUSE_SECRET_KEY")
    langfuse_host: str = Field(default="http://localhost:3000", alias="LANGFUSE_HOST")
    enable_tracing: bool = Field(
        default=False,
        description="Connect to Langfuse at all; registry calls are no-ops when off",
    )
    prompt_labels: list[str] = Field(
        default_factory=lambda: ["development"],
        description="Labels attached to stage prompts registered at startup",
    )
