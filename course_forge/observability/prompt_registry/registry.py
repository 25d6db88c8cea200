"""
Langfuse prompt registry for versioned stage prompts.

Singleton registry that pushes the pipeline's ChatPromptTemplates to
Langfuse (a new version whenever the text changes) and serves them back
as LangChain templates.

Dependencies: langfuse, course_forge.configs, course_forge.observability.prompt_registry
System role: Prompt version control and retrieval
"""

import logging
from typing import TYPE_CHECKING

from langchain_core.prompts import ChatPromptTemplate
from langfuse import Langfuse

from course_forge.configs import get_settings
from course_forge.observability.prompt_registry.converter import convert_chat_template
from course_forge.observability.prompt_registry.models import ModelConfig

if TYPE_CHECKING:
    from langfuse.model import ChatPromptClient

logger = logging.getLogger(__name__)


class PromptRegistry:
    """
    Singleton registry for Langfuse prompt management.

    Inactive (every call is a no-op returning None) when tracing is
    disabled or the Langfuse keys are missing.

    Example:
        >>> registry = PromptRegistry()
        >>> registry.register_prompt(
        ...     name="course-forge-outline",
        ...     template=OUTLINE_PROMPT,
        ...     config=ModelConfig(model="gemini-2.5-flash", temperature=0.7),
        ...     labels=["production"],
        ... )
    """

    _instance: "PromptRegistry | None" = None
    _client: Langfuse | None = None
    _enabled: bool = False

    def __new__(cls) -> "PromptRegistry":
        """Singleton pattern for registry instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize Langfuse client with configuration."""
        obs_settings = get_settings().observability

        if not obs_settings.enable_tracing:
            logger.info("Langfuse disabled, prompt registry inactive")
            self._enabled = False
            return

        if not obs_settings.langfuse_public_key or not obs_settings.langfuse_secret_key:
            logger.warning("Langfuse keys not configured, prompt registry inactive")
            self._enabled = False
            return

        self._client = Langfuse(
            public_key=obs_settings.langfuse_public_key,
            secret_key=obs_settings.langfuse_secret_key,
            host=obs_settings.langfuse_host,
        )
        self._enabled = True
        logger.info("Prompt registry initialized: host=%s", obs_settings.langfuse_host)

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._enabled

    def register_prompt(
        self,
        name: str,
        template: ChatPromptTemplate,
        config: ModelConfig,
        labels: list[str] | None = None,
    ) -> "ChatPromptClient | None":
        """
        Register or version a chat prompt in Langfuse.

        Args:
            name: Unique prompt identifier
            template: LangChain ChatPromptTemplate
            config: Model configuration to store with prompt
            labels: Optional labels (e.g., ["production", "staging"])

        Returns:
            The created Langfuse prompt, or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, skipping registration: name=%s", name)
            return None

        labels = labels or []
        prompt = self._client.create_prompt(
            name=name,
            type="chat",
            prompt=convert_chat_template(template),
            config=config.to_langfuse_config(),
            labels=labels,
        )
        logger.info(
            "Registered chat prompt: name=%s version=%s labels=%s",
            name, prompt.version, labels,
        )
        return prompt

    def get_langchain_prompt(
        self,
        name: str,
        label: str | None = None,
        version: int | None = None,
    ) -> ChatPromptTemplate | None:
        """
        Fetch a prompt from Langfuse as a ChatPromptTemplate.

        The Langfuse prompt object is attached as template metadata.

        Args:
            name: Prompt identifier
            label: Optional label filter
            version: Optional specific version number

        Returns:
            ChatPromptTemplate, or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, cannot fetch: name=%s", name)
            return None

        kwargs: dict = {"name": name, "type": "chat"}
        if label:
            kwargs["label"] = label
        if version is not None:
            kwargs["version"] = version

        prompt = self._client.get_prompt(**kwargs)
        logger.debug("Fetched prompt: name=%s version=%s", name, prompt.version)

        template = ChatPromptTemplate.from_messages(prompt.get_langchain_prompt())
        template.metadata = {"langfuse_prompt": prompt}
        return template
