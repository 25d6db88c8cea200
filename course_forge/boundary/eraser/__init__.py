"""Eraser diagram rendering boundary."""

from course_forge.boundary.eraser.eraser_client import EraserDiagramClient, create_eraser_client

__all__ = ["EraserDiagramClient", "create_eraser_client"]
