"""Diagram service layer.

Renders diagrams for free text or for the nodes of a generation result.
Many-node rendering fans out under a semaphore; each node owns exactly one
key of the returned DiagramMap, and a failing node never affects another.

Dependencies: asyncio, pydantic, Eraser client, diagram nodes
System role: Service layer for rendered diagrams
"""

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from course_forge.boundary.eraser import EraserDiagramClient
from course_forge.core.diagram_nodes import DiagramNode, enumerate_diagram_nodes
from course_forge.core.exceptions import (
    ConfigurationError,
    CourseForgeException,
    InvalidInputError,
)
from course_forge.core.generation_pipeline import GenerationResult
from course_forge.models.diagram import (
    DEFAULT_DIAGRAM_TYPE,
    DEFAULT_MODE,
    DEFAULT_THEME,
    DiagramResponse,
    NodeDiagramsResponse,
)
from course_forge.observability import get_logger
from course_forge.observability.log_utils import log_with_context

logger = get_logger(__name__)


class DiagramService:
    """Service for rendering diagrams through the Eraser API."""

    def __init__(
        self,
        client: EraserDiagramClient,
        max_concurrency: int = 1,
        excerpt_chars: int = 200,
    ) -> None:
        """
        Args:
            client: Stateless Eraser client
            max_concurrency: In-flight render requests allowed by render_nodes
            excerpt_chars: Characters of node content included in node prompts
        """
        self._client = client
        self._max_concurrency = max_concurrency
        self._excerpt_chars = excerpt_chars

    async def render(
        self,
        text: Any,
        diagram_type: str = DEFAULT_DIAGRAM_TYPE.value,
        theme: str = DEFAULT_THEME,
        mode: str = DEFAULT_MODE,
    ) -> dict[str, Any]:
        """Render one diagram; returns the Eraser body verbatim. Single attempt."""
        return await self._client.render_diagram(
            text=text,
            diagram_type=diagram_type,
            theme=theme,
            mode=mode,
        )

    def nodes(self, result: GenerationResult) -> list[DiagramNode]:
        """Every diagrammable node of a result."""
        return enumerate_diagram_nodes(result, excerpt_chars=self._excerpt_chars)

    async def render_nodes(
        self,
        result: GenerationResult,
        keys: list[str] | None = None,
        theme: str = DEFAULT_THEME,
        mode: str = DEFAULT_MODE,
    ) -> NodeDiagramsResponse:
        """
        Render diagrams for the selected nodes of a result.

        Args:
            result: Generation result whose nodes are diagrammed
            keys: Node keys to render (all nodes when None)
            theme: Rendering theme
            mode: Rendering mode

        Returns:
            NodeDiagramsResponse: diagrams by key for successes, messages by key for failures

        Raises:
            InvalidInputError: If a key names no node (no request is sent)
            ConfigurationError: If the Eraser token is missing (no request is sent)
        """
        nodes_by_key = {node.key: node for node in self.nodes(result)}
        if keys is None:
            selected = list(nodes_by_key.values())
        else:
            unknown = [key for key in keys if key not in nodes_by_key]
            if unknown:
                raise InvalidInputError(f"Unknown diagram node keys: {unknown}", field="keys")
            selected = [nodes_by_key[key] for key in dict.fromkeys(keys)]

        if not self._client.is_configured:
            raise ConfigurationError("Eraser API token is not configured", setting="ERASER_API_TOKEN")

        logger.info(
            f"{__name__}:render_nodes - START nodes={len(selected)}, "
            f"max_concurrency={self._max_concurrency}"
        )

        semaphore = asyncio.Semaphore(self._max_concurrency)
        response = NodeDiagramsResponse()

        async def render_one(node: DiagramNode) -> None:
            async with semaphore:
                try:
                    body = await self._client.render_diagram(
                        text=node.text,
                        diagram_type=node.diagram_type.value,
                        theme=theme,
                        mode=mode,
                    )
                    response.diagrams[node.key] = DiagramResponse.model_validate(body)
                except (CourseForgeException, ValidationError) as e:
                    log_with_context(
                        logger,
                        logging.WARNING,
                        f"{__name__}:render_nodes - node={node.key} FAILED: {type(e).__name__}: {e}",
                        node_key=node.key,
                        error_type=type(e).__name__,
                    )
                    response.failures[node.key] = getattr(e, "message", "Invalid diagram response")

        await asyncio.gather(*(render_one(node) for node in selected))

        logger.info(
            f"{__name__}:render_nodes - COMPLETE ok={len(response.diagrams)}, "
            f"failed={len(response.failures)}"
        )
        return response
