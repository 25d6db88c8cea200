"""
Exception hierarchy for Course Forge.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseForgeException(Exception):
    """Base exception for all Course Forge application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(CourseForgeException):
    """Raised when caller-supplied input fails a precondition."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid input error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class ConfigurationError(CourseForgeException):
    """Raised when a required provider credential or setting is absent."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if setting:
            details["setting"] = setting
        self.setting = setting
        super().__init__(message, details)


class UpstreamError(CourseForgeException):
    """Raised when the LLM or diagram provider fails or is unreachable."""

    def __init__(
        self,
        message: str,
        service: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message
            service: Upstream service name ("llm", "eraser")
            status_code: HTTP status returned by the upstream, when there was one
            details: Additional context
        """
        details = details or {}
        details["service"] = service
        if status_code is not None:
            details["status_code"] = status_code
        self.service = service
        self.status_code = status_code
        super().__init__(message, details)


class SchemaViolationError(UpstreamError):
    """Raised when model output does not match a stage's expected structure."""

    def __init__(
        self,
        stage: str,
        errors: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["stage"] = stage
        if errors:
            details["errors"] = errors
        self.stage = stage
        self.errors = errors or []
        super().__init__(f"Output of stage '{stage}' failed schema validation", "llm", details=details)


class PipelineError(CourseForgeException):
    """Raised when a generation stage fails; wraps the underlying cause."""

    def __init__(
        self,
        stage: str,
        cause: Exception,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["stage"] = stage
        details["cause"] = type(cause).__name__
        self.stage = stage
        self.cause = cause
        super().__init__(f"Generation failed during stage '{stage}': {cause}", details)


class SavedContentNotFoundError(CourseForgeException):
    """Raised when a saved content item cannot be found."""

    def __init__(self, item_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["item_id"] = item_id
        self.item_id = item_id
        super().__init__(f"Saved content not found: {item_id}", details)
