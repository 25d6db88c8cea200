"""
Retry policy configuration.

Explicit retry policy for LLM stage calls. The default of one attempt
means no retry at all.

Dependencies: pydantic_settings
System role: Retry/backoff configuration for upstream calls
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrySettings(BaseSettings):
    """Retry policy applied to each pipeline stage call."""

    model_config = SettingsConfigDict(
        env_prefix="RETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_attempts: int = Field(
        default=1,
        ge=1,
        description="Total attempts per stage call (1 disables retry)",
    )
    initial_wait: float = Field(
        default=1.0,
        ge=0.0,
        description="Initial backoff in seconds",
    )
    max_wait: float = Field(
        default=30.0,
        ge=0.0,
        description="Upper bound on a single backoff in seconds",
    )
    jitter: float = Field(
        default=1.0,
        ge=0.0,
        description="Maximum random jitter added to each backoff",
    )
    retry_on_schema_violation: bool = Field(
        default=False,
        description="Also retry when the model output fails schema validation",
    )
