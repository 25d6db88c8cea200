"""
Result store factory.

Depends on STORE_BACKEND: "memory" for an in-process list, "file" for the
JSON document store.

Dependencies: course_forge.boundary.store, course_forge.configs
System role: Result store instantiation and selection
"""

import logging

from course_forge.boundary.store.base_store import ResultStore
from course_forge.boundary.store.json_file_store import JsonFileResultStore
from course_forge.boundary.store.memory_store import InMemoryResultStore
from course_forge.configs.storage import StorageSettings

logger = logging.getLogger(__name__)


def get_result_store(settings: StorageSettings) -> ResultStore:
    """
    Build the configured result store.

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = settings.backend.lower()

    if backend == "memory":
        logger.info(f"{__name__}:get_result_store - Creating in-memory result store")
        return InMemoryResultStore()

    if backend == "file":
        logger.info(f"{__name__}:get_result_store - Creating JSON file store at {settings.file_path}")
        return JsonFileResultStore(settings.file_path, key=settings.key)

    raise ValueError(f"Invalid STORE_BACKEND: {backend}. Must be 'memory' or 'file'.")
