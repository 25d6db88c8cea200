"""
Saved content API endpoints.

Routes:
- GET /saved-contents - List saved bundles, newest first
- POST /saved-contents - Save a bundle with its diagrams
- GET /saved-contents/{id} - Get one saved bundle
- DELETE /saved-contents/{id} - Delete one saved bundle

Dependencies: course_forge.application.services, course_forge.models
System role: Saved content HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from course_forge.api.deps import get_saved_content_service
from course_forge.application.services import SavedContentService
from course_forge.models.saved_content import SaveContentRequest, SavedContentItem

from .saved_content_error_handling import handle_saved_content_errors
from .saved_content_validators import validate_save_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/saved-contents", tags=["saved-contents"])


@router.get("", response_model=list[SavedContentItem])
@handle_saved_content_errors
async def list_saved_contents(
    saved_content_service: SavedContentService = Depends(get_saved_content_service),
) -> list[SavedContentItem]:
    """List saved bundles, newest first."""
    return await saved_content_service.list()


@router.post("", response_model=SavedContentItem, status_code=201)
@handle_saved_content_errors
async def save_content(
    request: SaveContentRequest,
    saved_content_service: SavedContentService = Depends(get_saved_content_service),
) -> SavedContentItem:
    """
    Save a generation bundle together with any rendered diagrams.

    Raises:
        HTTPException(400): blank title or diagrams keyed by unknown nodes
    """
    validate_save_request(request)
    item = await saved_content_service.save(
        data=request.data,
        diagrams=request.diagrams,
        title=request.title,
    )
    logger.info("Content saved", extra={"item_id": str(item.id)})
    return item


@router.get("/{item_id}", response_model=SavedContentItem)
@handle_saved_content_errors
async def get_saved_content(
    item_id: UUID,
    saved_content_service: SavedContentService = Depends(get_saved_content_service),
) -> SavedContentItem:
    """Get one saved bundle. Raises HTTPException(404) if absent."""
    return await saved_content_service.get(item_id)


@router.delete("/{item_id}", status_code=204)
@handle_saved_content_errors
async def delete_saved_content(
    item_id: UUID,
    saved_content_service: SavedContentService = Depends(get_saved_content_service),
) -> Response:
    """Delete one saved bundle; the order of the rest is preserved."""
    await saved_content_service.delete(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
