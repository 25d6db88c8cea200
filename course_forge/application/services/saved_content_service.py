"""Saved content service layer.

Creates, lists and deletes saved generation bundles. Items are built once
and never mutated; the store keeps them newest first.

Dependencies: uuid, time, result store
System role: Service layer for saved contents
"""

import logging
import time
import uuid

from course_forge.boundary.store import ResultStore
from course_forge.core.exceptions import SavedContentNotFoundError
from course_forge.core.generation_pipeline import GenerationResult
from course_forge.models.diagram import DiagramMap
from course_forge.models.saved_content import SavedContentItem

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class SavedContentService:
    """Service for persisted generation bundles."""

    def __init__(self, store: ResultStore) -> None:
        self._store = store

    async def save(
        self,
        data: GenerationResult,
        diagrams: DiagramMap | None = None,
        title: str | None = None,
    ) -> SavedContentItem:
        """Persist a bundle; the title defaults to the outline title."""
        item = SavedContentItem(
            id=uuid.uuid4(),
            title=title or data.outline.title,
            timestamp=_now_ms(),
            data=data,
            diagrams=dict(diagrams) if diagrams else None,
        )
        await self._store.save(item)
        logger.info(f"{__name__}:save - Saved content id={item.id}, title={item.title!r}")
        return item

    async def list(self) -> list[SavedContentItem]:
        return await self._store.list()

    async def get(self, item_id: uuid.UUID) -> SavedContentItem:
        """
        Raises:
            SavedContentNotFoundError: If no item has this id
        """
        item = await self._store.get(item_id)
        if item is None:
            raise SavedContentNotFoundError(str(item_id))
        return item

    async def delete(self, item_id: uuid.UUID) -> None:
        """
        Raises:
            SavedContentNotFoundError: If no item has this id
        """
        if not await self._store.delete(item_id):
            raise SavedContentNotFoundError(str(item_id))
        logger.info(f"{__name__}:delete - Deleted content id={item_id}")
