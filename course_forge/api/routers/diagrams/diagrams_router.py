"""
Diagram API endpoints.

Routes:
- POST /generate-diagram - Render one diagram from text (Eraser body passed through)
- POST /generate-diagram/nodes - Render diagrams for nodes of a generation result

Dependencies: course_forge.application.services, course_forge.models
System role: Rendered diagram HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from course_forge.api.deps import get_diagram_service
from course_forge.application.services import DiagramService
from course_forge.models.diagram import (
    NodeDiagramsRequest,
    NodeDiagramsResponse,
)

from .diagram_error_handling import handle_diagram_errors
from .diagram_validators import validate_diagram_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate-diagram", tags=["diagrams"])


@router.post("", status_code=200)
@handle_diagram_errors
async def generate_diagram(
    body: Any = Body(default=None),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> dict[str, Any]:
    """
    Render a diagram from free text.

    Request body:
    - text: What to diagram (required)
    - diagramType: Eraser diagram type (default "cloud-architecture-diagram")
    - theme: default "light"
    - mode: default "standard"

    Returns:
        dict: Eraser response body, unchanged (imageUrl, createEraserFileUrl, diagrams)

    Raises:
        HTTPException(400): body not an object; text missing
        HTTPException(500 or upstream status): token unset or Eraser failure
    """
    request = validate_diagram_request(body)
    logger.info("Diagram requested", extra={"diagram_type": request.diagram_type})
    return await diagram_service.render(
        text=request.text,
        diagram_type=request.diagram_type,
        theme=request.theme,
        mode=request.mode,
    )


@router.post("/nodes", response_model=NodeDiagramsResponse, status_code=200)
@handle_diagram_errors
async def generate_node_diagrams(
    request: NodeDiagramsRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> NodeDiagramsResponse:
    """
    Render diagrams for the nodes of a generation result.

    Each node (overview, topic-i, interview-questions, question-i, chapter-i,
    subtopic-i-j) gets its own key; a failing node is reported under
    ``failures`` and does not affect the others.

    Raises:
        HTTPException(400): unknown node key
        HTTPException(500): Eraser token unset
    """
    logger.info(
        "Node diagrams requested",
        extra={"requested_keys": len(request.keys) if request.keys is not None else "all"},
    )
    return await diagram_service.render_nodes(
        result=request.result,
        keys=request.keys,
        theme=request.theme,
        mode=request.mode,
    )
