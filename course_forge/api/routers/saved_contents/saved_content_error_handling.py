"""
Saved content error handling utilities.

Decorator for consistent error handling across saved content endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from course_forge.core.exceptions import InvalidInputError, SavedContentNotFoundError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_saved_content_errors(func: F) -> F:
    """
    Decorator to handle saved content errors and transform them into HTTPExceptions.

    This centralizes:
    - 404 for unknown ids
    - 400 for invalid save requests
    - 500 for store failures
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except SavedContentNotFoundError as e:
            logger.warning("Saved content not found", extra={"item_id": e.item_id})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except InvalidInputError as e:
            logger.warning("Invalid saved content request", extra={"field": e.field, "error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except Exception as e:
            logger.exception("Unexpected failure in saved content operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during saved content operation",
            )

    return wrapper  # type: ignore
