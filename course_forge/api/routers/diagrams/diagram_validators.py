"""
Diagram request validation.

Dependencies: pydantic, course_forge.models.diagram
System role: Diagram request validation
"""

from typing import Any

from pydantic import ValidationError

from course_forge.core.exceptions import InvalidInputError
from course_forge.models.diagram import DiagramRequest


def validate_diagram_request(body: Any) -> DiagramRequest:
    """
    Parse a raw single-diagram request body.

    Returns:
        DiagramRequest: Request whose ``text`` is a non-blank string

    Raises:
        InvalidInputError: If the body is not an object, or text is missing,
            not a string, or blank
    """
    if not isinstance(body, dict):
        raise InvalidInputError("Text content is required", field="text")
    try:
        request = DiagramRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidInputError(
            f"Invalid request body ({e.error_count()} errors)", field="body"
        ) from e

    if request.text is None or request.text == "":
        raise InvalidInputError("Text content is required", field="text")
    if not isinstance(request.text, str):
        raise InvalidInputError("Text content must be a string", field="text")
    if not request.text.strip():
        raise InvalidInputError("Text content cannot be whitespace-only", field="text")
    return request
