"""
Diagram error handling utilities.

Decorator mapping diagram errors to HTTP responses. Upstream status codes
are forwarded when the diagram service returned one.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from course_forge.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

DIAGRAM_FAILED_DETAIL = "Failed to generate diagram"


def handle_diagram_errors(func: F) -> F:
    """
    Decorator to handle diagram errors and transform them into HTTPExceptions.

    This centralizes:
    - 400 for bad input or unknown node keys
    - 500 for a missing Eraser token
    - the upstream status (or 500) for Eraser failures
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except InvalidInputError as e:
            logger.warning("Invalid diagram request", extra={"field": e.field, "error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except ConfigurationError as e:
            logger.error("Diagram provider is not configured", extra={"setting": e.setting})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=DIAGRAM_FAILED_DETAIL,
            )

        except UpstreamError as e:
            logger.error(
                "Diagram service failed",
                extra={"service": e.service, "status_code": e.status_code, "error": e.message},
            )
            forwarded = e.status_code if e.status_code and e.status_code >= 400 else None
            raise HTTPException(
                status_code=forwarded or status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=DIAGRAM_FAILED_DETAIL,
            )

        except Exception as e:
            logger.exception("Unexpected failure in diagram generation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=DIAGRAM_FAILED_DETAIL,
            )

    return wrapper  # type: ignore
