"""
Generation request models.

Dependencies: pydantic
System role: Content generation API contracts
"""

from typing import Any

from pydantic import Field

from course_forge.models.diagram import CamelModel


class GenerationRequest(CamelModel):
    """Request schema for the content generation endpoint.

    ``input`` is typed loosely so that a missing or non-string value is
    rejected by the router as a 400 rather than a schema 422.
    """

    input: Any = Field(default=None, description="Syllabus or subject to expand")
    include_diagram: bool | None = Field(
        default=None,
        description="Run the plain-text diagram stage (configured default when omitted)",
    )
