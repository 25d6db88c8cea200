"""Tests for DiagramService."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from course_forge.application.services import DiagramService
from course_forge.core.exceptions import ConfigurationError, InvalidInputError, UpstreamError


def eraser_body(text: str) -> dict:
    return {
        "imageUrl": f"https://storage.example/{abs(hash(text))}.png",
        "createEraserFileUrl": "https://app.eraser.io/new",
        "diagrams": [],
    }


@pytest.fixture
def mock_eraser_client() -> MagicMock:
    client = MagicMock()
    client.is_configured = True
    client.render_diagram = AsyncMock(side_effect=lambda text, **_: eraser_body(text))
    return client


class TestRender:
    """Tests for single renders."""

    @pytest.mark.asyncio
    async def test_render_passes_through(self, mock_eraser_client: MagicMock) -> None:
        service = DiagramService(client=mock_eraser_client)

        body = await service.render("Vectors and matrices", diagram_type="concept-map")

        assert body == eraser_body("Vectors and matrices")
        mock_eraser_client.render_diagram.assert_awaited_once_with(
            text="Vectors and matrices",
            diagram_type="concept-map",
            theme="light",
            mode="standard",
        )

    @pytest.mark.asyncio
    async def test_render_is_single_attempt(self, mock_eraser_client: MagicMock) -> None:
        mock_eraser_client.render_diagram.side_effect = UpstreamError("down", service="eraser", status_code=502)
        service = DiagramService(client=mock_eraser_client)

        with pytest.raises(UpstreamError):
            await service.render("Vectors")

        assert mock_eraser_client.render_diagram.await_count == 1


class TestRenderNodes:
    """Tests for many-node rendering."""

    @pytest.mark.asyncio
    async def test_all_nodes_rendered(self, mock_eraser_client: MagicMock, generation_result) -> None:
        service = DiagramService(client=mock_eraser_client)

        response = await service.render_nodes(generation_result)

        assert len(response.diagrams) == 12
        assert response.failures == {}
        assert response.diagrams["chapter-0"].image_url.startswith("https://storage.example/")

    @pytest.mark.asyncio
    async def test_selected_keys_use_node_diagram_types(
        self, mock_eraser_client: MagicMock, generation_result
    ) -> None:
        service = DiagramService(client=mock_eraser_client)

        response = await service.render_nodes(generation_result, keys=["chapter-1", "overview"])

        assert set(response.diagrams) == {"chapter-1", "overview"}
        types = {c.kwargs["diagram_type"] for c in mock_eraser_client.render_diagram.await_args_list}
        assert types == {"flowchart", "mind-map"}

    @pytest.mark.asyncio
    async def test_failing_node_isolated(self, mock_eraser_client: MagicMock, generation_result) -> None:
        def render(text, **_):
            if text.startswith("Dot Product"):
                raise UpstreamError("Diagram service returned an error", service="eraser", status_code=500)
            return eraser_body(text)

        mock_eraser_client.render_diagram.side_effect = render
        service = DiagramService(client=mock_eraser_client, max_concurrency=4)

        response = await service.render_nodes(generation_result)

        assert set(response.failures) == {"question-1", "subtopic-0-1"}
        assert len(response.diagrams) == 10
        assert not set(response.failures) & set(response.diagrams)

    @pytest.mark.asyncio
    async def test_invalid_response_recorded_as_failure(
        self, mock_eraser_client: MagicMock, generation_result
    ) -> None:
        mock_eraser_client.render_diagram.side_effect = lambda text, **_: {"unexpected": True}
        service = DiagramService(client=mock_eraser_client)

        response = await service.render_nodes(generation_result, keys=["overview"])

        assert response.diagrams == {}
        assert "overview" in response.failures

    @pytest.mark.asyncio
    async def test_unknown_key_rejected_before_any_call(
        self, mock_eraser_client: MagicMock, generation_result
    ) -> None:
        service = DiagramService(client=mock_eraser_client)

        with pytest.raises(InvalidInputError):
            await service.render_nodes(generation_result, keys=["overview", "chapter-9"])

        mock_eraser_client.render_diagram.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_token_rejected_before_any_call(
        self, mock_eraser_client: MagicMock, generation_result
    ) -> None:
        mock_eraser_client.is_configured = False
        service = DiagramService(client=mock_eraser_client)

        with pytest.raises(ConfigurationError):
            await service.render_nodes(generation_result)

        mock_eraser_client.render_diagram.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrency_bounded(self, mock_eraser_client: MagicMock, generation_result) -> None:
        in_flight = 0
        peak = 0

        async def render(text, **_):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return eraser_body(text)

        mock_eraser_client.render_diagram = AsyncMock(side_effect=render)
        service = DiagramService(client=mock_eraser_client, max_concurrency=2)

        response = await service.render_nodes(generation_result)

        assert len(response.diagrams) == 12
        assert peak == 2

    @pytest.mark.asyncio
    async def test_duplicate_keys_rendered_once(self, mock_eraser_client: MagicMock, generation_result) -> None:
        service = DiagramService(client=mock_eraser_client)

        await service.render_nodes(generation_result, keys=["topic-0", "topic-0"])

        assert mock_eraser_client.render_diagram.await_count == 1
