"""
File-backed result store.

Keeps the newest-first item list under a single key of one JSON document,
mirroring how the browser client keeps it in local storage:

    {"euron-saved-contents": [ {...SavedContentItem...}, ... ]}

Reads tolerate a missing file (empty list) and malformed content: an
unparseable document reads as empty, and an invalid item is skipped while its
valid siblings are kept. Before a write replaces a document that held anything
unreadable, the original is copied aside to "<name>.corrupt". Writes replace
the file atomically through a temp file.

Dependencies: pydantic, fastapi.concurrency, json, shutil, tempfile
System role: Durable persistence for saved generation bundles
"""

import asyncio
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from pydantic import TypeAdapter, ValidationError

from course_forge.boundary.store.base_store import ResultStore
from course_forge.models.saved_content import SavedContentItem

logger = logging.getLogger(__name__)

_ITEMS_ADAPTER = TypeAdapter(list[SavedContentItem])


class JsonFileResultStore(ResultStore):
    """Result store persisted as one JSON document on disk."""

    def __init__(self, path: str | Path, key: str = "euron-saved-contents") -> None:
        """
        Args:
            path: JSON document location (parent directories are created on write)
            key: Document key holding the item list
        """
        self._path = Path(path)
        self._key = key
        self._lock = asyncio.Lock()

    @property
    def corrupt_path(self) -> Path:
        """Where an unreadable document is copied before it is overwritten."""
        return self._path.with_name(self._path.name + ".corrupt")

    def _load(self) -> tuple[list[SavedContentItem], bool]:
        """Return the valid items and whether anything on disk was unreadable."""
        if not self._path.exists():
            return [], False
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(
                f"{__name__}:_load - Failed to parse saved contents at {self._path}: "
                f"{type(e).__name__}: {e}"
            )
            return [], True

        raw_items = document.get(self._key, []) if isinstance(document, dict) else None
        if not isinstance(raw_items, list):
            logger.error(
                f"{__name__}:_load - Failed to parse saved contents at {self._path}: "
                f"expected a list under {self._key!r}"
            )
            return [], True

        items: list[SavedContentItem] = []
        damaged = False
        for index, raw in enumerate(raw_items):
            try:
                items.append(SavedContentItem.model_validate(raw))
            except ValidationError as e:
                damaged = True
                logger.warning(
                    f"{__name__}:_load - Skipping invalid saved item #{index} at {self._path}: "
                    f"{e.error_count()} validation errors"
                )
        return items, damaged

    def _read(self) -> list[SavedContentItem]:
        return self._load()[0]

    def _write(self, items: list[SavedContentItem], keep_original: bool = False) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if keep_original:
            shutil.copyfile(self._path, self.corrupt_path)
            logger.warning(
                f"{__name__}:_write - Copied unreadable saved contents to {self.corrupt_path}"
            )
        document = {self._key: _ITEMS_ADAPTER.dump_python(items, mode="json", by_alias=True)}
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".saved-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def list(self) -> list[SavedContentItem]:
        async with self._lock:
            return await run_in_threadpool(self._read)

    async def get(self, item_id: UUID) -> SavedContentItem | None:
        items = await self.list()
        return next((item for item in items if item.id == item_id), None)

    async def save(self, item: SavedContentItem) -> SavedContentItem:
        async with self._lock:
            items, damaged = await run_in_threadpool(self._load)
            await run_in_threadpool(self._write, [item, *items], damaged)
        logger.info(f"{__name__}:save - Saved item id={item.id}, total={len(items) + 1}")
        return item

    async def delete(self, item_id: UUID) -> bool:
        async with self._lock:
            items, damaged = await run_in_threadpool(self._load)
            remaining = [item for item in items if item.id != item_id]
            if len(remaining) == len(items):
                return False
            await run_in_threadpool(self._write, remaining, damaged)
        logger.info(f"{__name__}:delete - Deleted item id={item_id}")
        return True
