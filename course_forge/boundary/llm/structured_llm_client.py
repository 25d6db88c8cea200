"""
Structured LLM client.

Wraps a LangChain chat model behind two calls: one returning the raw
JSON-like object for a JSON schema, one returning free text. Provider
failures surface as UpstreamError; a missing credential surfaces as
ConfigurationError on first use, before any network call.

Dependencies: langchain_core, langchain_google_genai
System role: LLM provider boundary for the generation pipeline
"""

import logging
import os
from typing import Any, Callable

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import StrOutputParser

from course_forge.configs.llm import LLMSettings
from course_forge.core.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class StructuredLLMClient:
    """
    Thin async facade over a LangChain chat model.

    The model is built lazily by ``model_factory`` so that a missing
    credential is reported per request rather than at startup.
    """

    def __init__(self, model_factory: Callable[[], BaseChatModel]) -> None:
        """
        Initialize client.

        Args:
            model_factory: Zero-argument callable returning the chat model.
                May raise ConfigurationError.
        """
        self._model_factory = model_factory
        self._model: BaseChatModel | None = None

    @property
    def model(self) -> BaseChatModel:
        """Chat model, built on first access."""
        if self._model is None:
            self._model = self._model_factory()
        return self._model

    async def agenerate_structured(
        self,
        messages: list[BaseMessage],
        json_schema: dict[str, Any],
    ) -> Any:
        """
        Ask the model for an object matching ``json_schema``.

        The result is returned as parsed by the provider (normally a dict)
        and is NOT validated here.

        Raises:
            ConfigurationError: If the provider credential is missing
            UpstreamError: If the provider call fails
        """
        runnable = self.model.with_structured_output(json_schema)
        try:
            return await runnable.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:agenerate_structured - {type(e).__name__}: {e}")
            raise UpstreamError("LLM provider call failed", service="llm") from e

    async def agenerate_text(self, messages: list[BaseMessage]) -> str:
        """
        Ask the model for free text.

        Raises:
            ConfigurationError: If the provider credential is missing
            UpstreamError: If the provider call fails
        """
        chain = self.model | StrOutputParser()
        try:
            return await chain.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:agenerate_text - {type(e).__name__}: {e}")
            raise UpstreamError("LLM provider call failed", service="llm") from e


def create_llm_client(settings: LLMSettings) -> StructuredLLMClient:
    """
    Build a client for the configured Google Generative AI model.

    Args:
        settings: LLM settings (model id, temperature, api key)

    Returns:
        StructuredLLMClient: Client whose model is created on first call
    """

    def factory() -> BaseChatModel:
        api_key = settings.api_key or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            raise ConfigurationError(
                "LLM provider API key is not configured",
                setting="LLM_API_KEY",
            )
        # Lazy import to avoid loading the provider SDK at startup
        from langchain_google_genai import ChatGoogleGenerativeAI

        logger.info(f"{__name__}:create_llm_client - Creating model {settings.model_id}")
        return ChatGoogleGenerativeAI(
            model=settings.model_id,
            temperature=settings.temperature,
            google_api_key=api_key,
        )

    return StructuredLLMClient(model_factory=factory)
