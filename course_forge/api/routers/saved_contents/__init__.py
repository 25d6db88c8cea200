"""
Saved contents router package.

Exports the router for saved generation bundles.
"""

from .saved_contents_router import router

__all__ = ["router"]
