"""
Content generation API endpoints.

Routes:
- POST /content-generation - Run the staged pipeline for a subject

Dependencies: course_forge.application.services, course_forge.models
System role: Content generation HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from course_forge.api.deps import get_generation_service
from course_forge.application.services import GenerationService
from course_forge.core.generation_pipeline import GenerationResult

from .generation_error_handling import handle_generation_errors
from .generation_validators import validate_generation_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content-generation", tags=["content-generation"])


@router.post("", response_model=GenerationResult, status_code=200)
@handle_generation_errors
async def generate_content(
    body: Any = Body(default=None),
    generation_service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    """
    Generate an outline, interview questions, long-form content and an
    optional plain-text diagram for a subject.

    Args:
        body: Raw JSON body with input and optional includeDiagram
        generation_service: Injected GenerationService

    Returns:
        GenerationResult: outline, questionSet, contentBundle, diagram

    Raises:
        HTTPException(400): body not an object; input missing, not a string, or blank
        HTTPException(500): any stage failed
    """
    request = validate_generation_request(body)

    logger.info("Content generation requested", extra={"input_len": len(request.input)})
    return await generation_service.generate(request.input, include_diagram=request.include_diagram)
