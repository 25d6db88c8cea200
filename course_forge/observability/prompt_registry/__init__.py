"""
Langfuse prompt registry module.

Versions the pipeline's stage prompts in Langfuse together with the model
configuration they were written for.

Dependencies: langfuse, langchain_core, pydantic
System role: Prompt version management and LangChain integration
"""

from course_forge.observability.prompt_registry.models import ModelConfig
from course_forge.observability.prompt_registry.registry import PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
