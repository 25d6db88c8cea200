"""Tests for the structured LLM client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import HumanMessage

from course_forge.boundary.llm import StructuredLLMClient, create_llm_client
from course_forge.configs.llm import LLMSettings
from course_forge.core.exceptions import ConfigurationError, UpstreamError

MESSAGES = [HumanMessage(content="hello")]


@pytest.fixture
def mock_model() -> MagicMock:
    """Chat model mock supporting with_structured_output and the | operator."""
    model = MagicMock()
    structured = MagicMock()
    structured.ainvoke = AsyncMock(return_value={"title": "T", "topics": []})
    model.with_structured_output.return_value = structured

    chain = MagicMock()
    chain.ainvoke = AsyncMock(return_value="+--+\n|  |\n+--+")
    model.__or__.return_value = chain
    return model


class TestStructuredLLMClient:
    """Tests for StructuredLLMClient."""

    @pytest.mark.asyncio
    async def test_structured_returns_raw_output(self, mock_model: MagicMock) -> None:
        client = StructuredLLMClient(model_factory=lambda: mock_model)
        schema = {"title": "Outline", "type": "object"}

        result = await client.agenerate_structured(MESSAGES, schema)

        assert result == {"title": "T", "topics": []}
        mock_model.with_structured_output.assert_called_once_with(schema)

    @pytest.mark.asyncio
    async def test_text_returns_string(self, mock_model: MagicMock) -> None:
        client = StructuredLLMClient(model_factory=lambda: mock_model)

        assert await client.agenerate_text(MESSAGES) == "+--+\n|  |\n+--+"

    @pytest.mark.asyncio
    async def test_provider_error_becomes_upstream_error(self, mock_model: MagicMock) -> None:
        mock_model.with_structured_output.return_value.ainvoke.side_effect = RuntimeError("503")
        client = StructuredLLMClient(model_factory=lambda: mock_model)

        with pytest.raises(UpstreamError) as exc_info:
            await client.agenerate_structured(MESSAGES, {})

        assert exc_info.value.service == "llm"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_text_provider_error_becomes_upstream_error(self, mock_model: MagicMock) -> None:
        mock_model.__or__.return_value.ainvoke.side_effect = RuntimeError("timeout")
        client = StructuredLLMClient(model_factory=lambda: mock_model)

        with pytest.raises(UpstreamError):
            await client.agenerate_text(MESSAGES)

    def test_model_built_once(self, mock_model: MagicMock) -> None:
        factory = MagicMock(return_value=mock_model)
        client = StructuredLLMClient(model_factory=factory)

        assert client.model is client.model
        factory.assert_called_once()


class TestCreateLLMClient:
    """Tests for the Google Generative AI client factory."""

    @pytest.mark.asyncio
    async def test_missing_key_raises_configuration_error(self, monkeypatch) -> None:
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        client = create_llm_client(LLMSettings(api_key=None))

        with pytest.raises(ConfigurationError) as exc_info:
            await client.agenerate_structured(MESSAGES, {})

        assert exc_info.value.setting == "LLM_API_KEY"

    def test_client_creation_is_lazy(self, monkeypatch) -> None:
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        client = create_llm_client(LLMSettings(api_key=None))
        assert isinstance(client, StructuredLLMClient)
