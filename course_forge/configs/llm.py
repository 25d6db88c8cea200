"""
LLM provider configuration settings.

Model selection and generation toggles for the staged course pipeline.

Dependencies: pydantic_settings
System role: Configuration for the generation pipeline's LLM provider
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Settings for the chat model that runs each pipeline stage."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="gemini-2.5-flash",
        description="Google Generative AI model identifier",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for every stage",
    )
    api_key: str | None = Field(
        default=None,
        description="Provider API key (falls back to GOOGLE_API_KEY)",
    )
    include_text_diagram: bool = Field(
        default=True,
        description="Run the plain-text diagram stage after content generation",
    )
    reconcile_stages: bool = Field(
        default=True,
        description="Log mismatches between outline subtopics and later stages",
    )
    use_prompt_registry: bool = Field(
        default=False,
        description="Fetch stage prompts from the Langfuse prompt registry",
    )
    prompt_label: str | None = Field(
        default=None,
        description="Registry label to fetch when use_prompt_registry is set",
    )
