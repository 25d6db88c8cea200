"""FastAPI dependencies."""

from course_forge.api.deps.dependencies import (
    ServiceCache,
    get_diagram_service,
    get_generation_service,
    get_saved_content_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_diagram_service",
    "get_generation_service",
    "get_saved_content_service",
    "get_service_cache",
    "get_settings_dependency",
]
