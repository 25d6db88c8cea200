"""
Content generation router package.

Exports the router for the staged generation endpoint.
"""

from .generation_router import router

__all__ = ["router"]
