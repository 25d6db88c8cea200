"""API routers."""

from .diagrams import router as diagrams_router
from .generation import router as generation_router
from .health import router as health_router
from .saved_contents import router as saved_contents_router

__all__ = [
    "diagrams_router",
    "generation_router",
    "health_router",
    "saved_contents_router",
]
