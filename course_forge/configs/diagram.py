"""
Diagram rendering service configuration.

Settings for the Eraser render API used by the diagram endpoints.

Dependencies: pydantic_settings
System role: Diagram provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiagramSettings(BaseSettings):
    """Eraser diagram API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ERASER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_token: str | None = Field(
        default=None,
        description="Bearer token for the Eraser API (checked per request)",
    )
    api_url: str = Field(
        default="https://app.eraser.io/api/render/prompt",
        description="Eraser render-from-prompt endpoint",
    )
    timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Deadline for a single render request",
    )
    max_concurrency: int = Field(
        default=1,
        ge=1,
        description="Concurrent render requests when diagramming many nodes",
    )
    prompt_excerpt_chars: int = Field(
        default=200,
        ge=0,
        description="Characters of node content appended to the node title",
    )
