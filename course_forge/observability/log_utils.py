"""
Structured logging helpers.

Pipeline payloads (outlines, question sets, content bundles) can be large;
these helpers log their shape instead of their full body.

Dependencies: logging (stdlib), pydantic
System role: Logging helper functions
"""

import logging
from typing import Any

from pydantic import BaseModel


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value for a log line.

    Pydantic models and collections are summarised by size; long strings
    are truncated.

    Args:
        value: Value to render
        max_length: Maximum length before truncating

    Returns:
        str: Loggable representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, BaseModel):
            val_str = f"{type(value).__name__}({len(type(value).model_fields)} fields)"
        elif isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Log ``message`` with each context value passed through safe_log_value."""
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an exception with its traceback and context.

    Upstream failures also carry the forwarded status code.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context values
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    status_code = getattr(exc, "status_code", None)
    if status_code is not None:
        extra["upstream_status"] = status_code
    logger.error(message, exc_info=exc, extra=extra)
