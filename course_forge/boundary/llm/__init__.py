"""LLM provider boundary."""

from course_forge.boundary.llm.structured_llm_client import (
    StructuredLLMClient,
    create_llm_client,
)

__all__ = ["StructuredLLMClient", "create_llm_client"]
