"""
LangChain to Langfuse prompt converter.

Converts a ChatPromptTemplate into Langfuse chat messages, rewriting
LangChain's {variable} placeholders into Langfuse's {{variable}} form.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re
from typing import TypedDict

from langchain_core.prompts import ChatPromptTemplate
from langchain_core.prompts.chat import (
    AIMessagePromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)

_VARIABLE_PATTERN = re.compile(r"(?<!\{)\{([^{}]+)\}(?!\})")

_ROLE_BY_TEMPLATE = {
    SystemMessagePromptTemplate: "system",
    HumanMessagePromptTemplate: "user",
    AIMessagePromptTemplate: "assistant",
}


class LangfuseMessage(TypedDict):
    """Langfuse chat message format."""

    role: str
    content: str


def convert_variables(content: str) -> str:
    """Rewrite single-brace placeholders as double-brace; doubled braces are left alone."""
    return _VARIABLE_PATTERN.sub(r"{{\1}}", content)


def convert_chat_template(template: ChatPromptTemplate) -> list[LangfuseMessage]:
    """
    Convert a ChatPromptTemplate to Langfuse chat messages.

    Args:
        template: LangChain ChatPromptTemplate instance

    Returns:
        list[LangfuseMessage]: One message per template message, in order

    Raises:
        ValueError: If the template holds a message type other than
            system/human/ai message templates

    Example:
        >>> template = ChatPromptTemplate.from_messages([
        ...     ("system", "You are a {role}"),
        ...     ("human", "{subject}")
        ... ])
        >>> convert_chat_template(template)[0]
        {'role': 'system', 'content': 'You are a {{role}}'}
    """
    messages: list[LangfuseMessage] = []
    for message in template.messages:
        role = _ROLE_BY_TEMPLATE.get(type(message))
        if role is None:
            raise ValueError(f"Unsupported message type: {type(message).__name__}")
        content = convert_variables(str(message.prompt.template))
        messages.append(LangfuseMessage(role=role, content=content))
    return messages
