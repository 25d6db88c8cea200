"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
Every config module maps environment variables with validation.
"""

from course_forge.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
