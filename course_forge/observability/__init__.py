"""
Observability module.

Provides logging configuration, correlation ID tracking and
stage prompt version management.
"""

from course_forge.observability.logger import configure_logging, get_logger
from course_forge.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = ["configure_logging", "get_logger", "PromptRegistry", "ModelConfig"]
