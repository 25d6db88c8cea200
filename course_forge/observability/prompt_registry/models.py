"""
Model configuration stored with each registered stage prompt.

Dependencies: pydantic
System role: Prompt-model pairing for the Langfuse prompt registry
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    Parameters a stage prompt was tuned against.

    Attributes:
        model: LLM model identifier (e.g., "gemini-2.5-flash")
        temperature: Sampling temperature (0.0-2.0)
        max_tokens: Maximum tokens in response
        stage: Pipeline stage the prompt drives
        structured_output: Whether the stage expects schema-constrained JSON
        extra: Additional model-specific parameters
    """

    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)
    stage: str | None = Field(default=None, description="Pipeline stage name")
    structured_output: bool = Field(
        default=False,
        description="Stage output is validated against a JSON schema",
    )
    extra: dict[str, Any] | None = None

    def to_langfuse_config(self) -> dict[str, Any]:
        """Flatten into the config dict Langfuse stores with a prompt."""
        config = self.model_dump(exclude={"extra"}, exclude_none=True)
        if not self.structured_output:
            config.pop("structured_output")
        if self.extra:
            config.update(self.extra)
        return config
