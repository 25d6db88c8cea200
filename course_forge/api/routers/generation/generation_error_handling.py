"""
Generation error handling utilities.

Decorator mapping pipeline errors to HTTP responses. Callers only ever see
a 400 for bad input or a generic 500; stage and cause go to the log.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from course_forge.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    PipelineError,
)
from course_forge.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

GENERATION_FAILED_DETAIL = "Failed to generate content"


def handle_generation_errors(func: F) -> F:
    """
    Decorator to handle generation errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with stage and cause
    - Mapping InvalidInputError to 400 and every other failure to 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except InvalidInputError as e:
            logger.warning("Invalid generation request", extra={"field": e.field, "error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except PipelineError as e:
            if isinstance(e.cause, ConfigurationError):
                logger.error(
                    "LLM provider is not configured",
                    extra={"setting": e.cause.setting, "stage": e.stage},
                )
            else:
                log_exception_with_context(
                    logger,
                    "Generation pipeline failed",
                    e,
                    stage=e.stage,
                    cause_type=type(e.cause).__name__,
                    cause_details=getattr(e.cause, "details", None),
                )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=GENERATION_FAILED_DETAIL,
            )

        except Exception as e:
            logger.exception("Unexpected failure in content generation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=GENERATION_FAILED_DETAIL,
            )

    return wrapper  # type: ignore
