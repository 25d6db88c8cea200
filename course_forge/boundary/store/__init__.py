"""Saved content persistence."""

from course_forge.boundary.store.base_store import ResultStore
from course_forge.boundary.store.json_file_store import JsonFileResultStore
from course_forge.boundary.store.memory_store import InMemoryResultStore
from course_forge.boundary.store.store_factory import get_result_store

__all__ = [
    "InMemoryResultStore",
    "JsonFileResultStore",
    "ResultStore",
    "get_result_store",
]
