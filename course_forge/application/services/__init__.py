"""Application services."""

from course_forge.application.services.diagram_service import DiagramService
from course_forge.application.services.generation_service import GenerationService
from course_forge.application.services.saved_content_service import SavedContentService

__all__ = ["DiagramService", "GenerationService", "SavedContentService"]
