"""
Saved content validation utilities.

Business rules not covered by the Pydantic models.

Dependencies: course_forge.models.saved_content, course_forge.core.diagram_nodes
System role: Saved content request validation
"""

from course_forge.core.diagram_nodes import enumerate_diagram_nodes
from course_forge.core.exceptions import InvalidInputError
from course_forge.models.saved_content import SaveContentRequest


def validate_save_request(request: SaveContentRequest) -> None:
    """
    Validate a save request.

    Raises:
        InvalidInputError: If the title is blank, or a diagram is keyed by a
            node the bundle does not have
    """
    if request.title is not None and not request.title.strip():
        raise InvalidInputError("Title cannot be empty or whitespace-only", field="title")

    if request.diagrams:
        known = {node.key for node in enumerate_diagram_nodes(request.data)}
        unknown = sorted(set(request.diagrams) - known)
        if unknown:
            raise InvalidInputError(f"Diagrams keyed by unknown nodes: {unknown}", field="diagrams")
