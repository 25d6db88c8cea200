"""Tests for the Eraser render API client."""

import json

import httpx
import pytest

from course_forge.boundary.eraser import EraserDiagramClient
from course_forge.core.exceptions import ConfigurationError, InvalidInputError, UpstreamError

API_URL = "https://app.eraser.io/api/render/prompt"

STUB_BODY = {
    "imageUrl": "https://storage.example/diagram.png",
    "createEraserFileUrl": "https://app.eraser.io/new?requestId=abc",
    "diagrams": [{"diagramType": "concept-map", "code": "Vectors > Matrices"}],
}


class RecordingHandler:
    """httpx.MockTransport handler that records requests."""

    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self._response = response or httpx.Response(200, json=STUB_BODY)
        self._error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._response


def make_client(handler: RecordingHandler, api_token: str | None = "eraser-token") -> EraserDiagramClient:
    return EraserDiagramClient(
        api_token=api_token,
        api_url=API_URL,
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


class TestRenderDiagram:
    """Tests for render_diagram."""

    @pytest.mark.asyncio
    async def test_returns_body_unchanged(self) -> None:
        handler = RecordingHandler()
        client = make_client(handler)

        body = await client.render_diagram("Vectors and matrices", diagram_type="concept-map")

        assert body == STUB_BODY
        assert body["imageUrl"] == STUB_BODY["imageUrl"]
        assert body["createEraserFileUrl"] == STUB_BODY["createEraserFileUrl"]

    @pytest.mark.asyncio
    async def test_request_shape(self) -> None:
        handler = RecordingHandler()
        client = make_client(handler)

        await client.render_diagram("Vectors and matrices", diagram_type="concept-map", theme="dark")

        request = handler.requests[0]
        assert request.method == "POST"
        assert str(request.url) == API_URL
        assert request.headers["Authorization"] == "Bearer eraser-token"
        assert json.loads(request.content) == {
            "theme": "dark",
            "mode": "standard",
            "diagramType": "concept-map",
            "text": "Vectors and matrices",
        }

    @pytest.mark.asyncio
    async def test_defaults(self) -> None:
        handler = RecordingHandler()
        client = make_client(handler)

        await client.render_diagram("Vectors and matrices")

        payload = json.loads(handler.requests[0].content)
        assert payload["diagramType"] == "cloud-architecture-diagram"
        assert payload["theme"] == "light"
        assert payload["mode"] == "standard"

    @pytest.mark.asyncio
    async def test_missing_token_makes_no_request(self) -> None:
        handler = RecordingHandler()
        client = make_client(handler, api_token=None)

        with pytest.raises(ConfigurationError) as exc_info:
            await client.render_diagram("Vectors and matrices")

        assert exc_info.value.setting == "ERASER_API_TOKEN"
        assert handler.requests == []
        assert not client.is_configured

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", None])
    async def test_blank_text_rejected(self, text) -> None:
        handler = RecordingHandler()
        client = make_client(handler)

        with pytest.raises(InvalidInputError):
            await client.render_diagram(text)

        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_non_2xx_propagates_status(self) -> None:
        handler = RecordingHandler(response=httpx.Response(403, text="forbidden"))
        client = make_client(handler)

        with pytest.raises(UpstreamError) as exc_info:
            await client.render_diagram("Vectors and matrices")

        assert exc_info.value.status_code == 403
        assert exc_info.value.service == "eraser"

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        handler = RecordingHandler(error=httpx.ConnectError("connection refused"))
        client = make_client(handler)

        with pytest.raises(UpstreamError) as exc_info:
            await client.render_diagram("Vectors and matrices")

        assert exc_info.value.status_code is None
        assert len(handler.requests) == 1

    @pytest.mark.asyncio
    async def test_invalid_json_body(self) -> None:
        handler = RecordingHandler(response=httpx.Response(200, text="<html>oops</html>"))
        client = make_client(handler)

        with pytest.raises(UpstreamError):
            await client.render_diagram("Vectors and matrices")
