"""
Saved content models.

A SavedContentItem is created once on save and never mutated; the store
holds them newest first.

Dependencies: pydantic, uuid
System role: Persisted generation bundles
"""

import uuid

from pydantic import Field

from course_forge.core.generation_pipeline.pipeline_schema import GenerationResult
from course_forge.models.diagram import CamelModel, DiagramMap


class SavedContentItem(CamelModel):
    """A persisted generation bundle plus any diagrams generated for it."""

    id: uuid.UUID
    title: str
    timestamp: int = Field(description="Save time in epoch milliseconds")
    data: GenerationResult
    diagrams: DiagramMap | None = None


class SaveContentRequest(CamelModel):
    """Request schema for saving a generation bundle."""

    data: GenerationResult
    diagrams: DiagramMap | None = None
    title: str | None = Field(
        default=None,
        max_length=255,
        description="Display title (outline title when omitted)",
    )
