"""
Eraser render API client.

Translates a piece of text plus a diagram style into one call to the
Eraser render-from-prompt endpoint and returns the service's JSON body
unchanged (imageUrl, createEraserFileUrl, diagrams).

The client is stateless and safe to call concurrently; any concurrency
limit belongs to the caller. A single attempt is made per call.

Dependencies: httpx, course_forge.core.exceptions
System role: Boundary adapter for the external diagram renderer
"""

import logging
from typing import Any

import httpx

from course_forge.configs.diagram import DiagramSettings
from course_forge.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    UpstreamError,
)
from course_forge.models.diagram import DEFAULT_DIAGRAM_TYPE, DEFAULT_MODE, DEFAULT_THEME

logger = logging.getLogger(__name__)


class EraserDiagramClient:
    """Async client for the Eraser render API."""

    def __init__(
        self,
        api_token: str | None,
        api_url: str,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_token: Bearer token; a missing token fails each call, not construction
            api_url: Render endpoint URL
            timeout: Per-request deadline in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._api_token = api_token
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._api_token)

    async def render_diagram(
        self,
        text: str,
        diagram_type: str = DEFAULT_DIAGRAM_TYPE.value,
        theme: str = DEFAULT_THEME,
        mode: str = DEFAULT_MODE,
    ) -> dict[str, Any]:
        """
        Render a diagram from a text prompt.

        Args:
            text: What to diagram (non-empty)
            diagram_type: Eraser diagram type, e.g. "concept-map"
            theme: Rendering theme
            mode: Rendering mode

        Returns:
            dict: Eraser response body, verbatim

        Raises:
            InvalidInputError: If text is empty
            ConfigurationError: If no API token is configured (no request is sent)
            UpstreamError: On non-2xx status, transport failure or a non-JSON body
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("Text content is required", field="text")
        if not self._api_token:
            raise ConfigurationError("Eraser API token is not configured", setting="ERASER_API_TOKEN")

        payload = {
            "theme": theme,
            "mode": mode,
            "diagramType": diagram_type,
            "text": text,
        }
        headers = {"Authorization": f"Bearer {self._api_token}"}

        logger.info(
            f"{__name__}:render_diagram - START diagram_type={diagram_type}, text_len={len(text)}"
        )
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"{__name__}:render_diagram - FAILED transport: {type(e).__name__}: {e}")
            raise UpstreamError("Diagram service request failed", service="eraser") from e

        if response.is_error:
            logger.error(
                f"{__name__}:render_diagram - FAILED status={response.status_code}: {response.text[:500]}"
            )
            raise UpstreamError(
                "Diagram service returned an error",
                service="eraser",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"{__name__}:render_diagram - FAILED invalid JSON body")
            raise UpstreamError("Diagram service returned invalid JSON", service="eraser") from e

        logger.info(f"{__name__}:render_diagram - OK status={response.status_code}")
        return data


def create_eraser_client(
    settings: DiagramSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> EraserDiagramClient:
    """Build an Eraser client from DiagramSettings."""
    return EraserDiagramClient(
        api_token=settings.api_token,
        api_url=settings.api_url,
        timeout=settings.timeout_seconds,
        transport=transport,
    )
