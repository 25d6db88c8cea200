"""
Diagram router package.

Exports the router for rendered diagram endpoints.
"""

from .diagrams_router import router

__all__ = ["router"]
