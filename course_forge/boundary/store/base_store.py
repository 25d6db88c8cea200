"""
Result store interface.

Ordered, newest-first collection of SavedContentItem keyed by id. Every
implementation must round-trip items unchanged and keep the relative
order of the remaining items on delete.

Dependencies: abc, saved content models
System role: Persistence contract for saved generation bundles
"""

from abc import ABC, abstractmethod
from uuid import UUID

from course_forge.models.saved_content import SavedContentItem


class ResultStore(ABC):
    """Abstract key-value store of saved generation bundles."""

    @abstractmethod
    async def list(self) -> list[SavedContentItem]:
        """All items, newest first."""

    @abstractmethod
    async def get(self, item_id: UUID) -> SavedContentItem | None:
        """Item with the given id, or None."""

    @abstractmethod
    async def save(self, item: SavedContentItem) -> SavedContentItem:
        """Insert ``item`` at the front of the list."""

    @abstractmethod
    async def delete(self, item_id: UUID) -> bool:
        """Remove the item with ``item_id``; returns False if it was absent."""
