"""
Generation request validation.

The request body is taken as raw JSON so that presence and type problems,
including a missing or non-object body, yield a 400 rather than a schema 422.

Dependencies: pydantic, course_forge.models.generation
System role: Content generation request validation
"""

from typing import Any

from pydantic import ValidationError

from course_forge.core.exceptions import InvalidInputError
from course_forge.models.generation import GenerationRequest


def validate_generation_request(body: Any) -> GenerationRequest:
    """
    Parse a raw generation request body.

    Returns:
        GenerationRequest: Request whose ``input`` is a non-blank string

    Raises:
        InvalidInputError: If the body is not an object, or input is missing,
            not a string, or blank
    """
    if not isinstance(body, dict):
        raise InvalidInputError("Input is required", field="input")
    try:
        request = GenerationRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidInputError(
            f"Invalid request body ({e.error_count()} errors)", field="body"
        ) from e

    if request.input is None:
        raise InvalidInputError("Input is required", field="input")
    if not isinstance(request.input, str):
        raise InvalidInputError("Input must be a string", field="input")
    if not request.input.strip():
        raise InvalidInputError("Input cannot be empty or whitespace-only", field="input")
    return request
