"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from course_forge.configs.base import BaseSettings
from course_forge.configs.diagram import DiagramSettings
from course_forge.configs.llm import LLMSettings
from course_forge.configs.observability import ObservabilitySettings
from course_forge.configs.retry import RetrySettings
from course_forge.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    llm: LLMSettings = Field(default_factory=LLMSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    diagram: DiagramSettings = Field(default_factory=DiagramSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from course_forge.configs import get_settings
        settings = get_settings()
    """
    return Settings()
