"""In-process result store, used by tests and the "memory" backend."""

from uuid import UUID

from course_forge.boundary.store.base_store import ResultStore
from course_forge.models.saved_content import SavedContentItem


class InMemoryResultStore(ResultStore):
    """Result store backed by a Python list (newest first)."""

    def __init__(self, items: list[SavedContentItem] | None = None) -> None:
        self._items: list[SavedContentItem] = list(items or [])

    async def list(self) -> list[SavedContentItem]:
        return list(self._items)

    async def get(self, item_id: UUID) -> SavedContentItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    async def save(self, item: SavedContentItem) -> SavedContentItem:
        self._items.insert(0, item)
        return item

    async def delete(self, item_id: UUID) -> bool:
        remaining = [item for item in self._items if item.id != item_id]
        removed = len(remaining) != len(self._items)
        self._items = remaining
        return removed
