"""Tests for LangChain to Langfuse converter."""

import pytest
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from course_forge.core.generation_pipeline.pipeline_prompt import OUTLINE_PROMPT
from course_forge.observability.prompt_registry.converter import (
    convert_chat_template,
    convert_variables,
)


class TestVariableConversion:
    """Tests for variable syntax conversion."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Outline:\n{outline}", "Outline:\n{{outline}}"),
            ('Topic: "{subject}" with {outline_example}', 'Topic: "{{subject}}" with {{outline_example}}'),
            ("No variables here", "No variables here"),
            ("Already {{doubled}}", "Already {{doubled}}"),
            ("Empty {} braces", "Empty {} braces"),
        ],
    )
    def test_convert_variables(self, raw: str, expected: str) -> None:
        assert convert_variables(raw) == expected


class TestChatTemplateConversion:
    """Tests for ChatPromptTemplate conversion."""

    def test_roles_mapped(self) -> None:
        template = ChatPromptTemplate.from_messages([
            ("system", "System {persona}"),
            ("human", "User {subject}"),
            ("ai", "Assistant"),
        ])

        assert convert_chat_template(template) == [
            {"role": "system", "content": "System {{persona}}"},
            {"role": "user", "content": "User {{subject}}"},
            {"role": "assistant", "content": "Assistant"},
        ]

    def test_outline_prompt_keeps_example_placeholder(self) -> None:
        messages = convert_chat_template(OUTLINE_PROMPT)

        assert [m["role"] for m in messages] == ["system", "user"]
        assert "{{subject}}" in messages[1]["content"]
        assert "{{outline_example}}" in messages[1]["content"]

    def test_placeholder_rejected(self) -> None:
        template = ChatPromptTemplate.from_messages([
            ("system", "System"),
            MessagesPlaceholder("history"),
        ])

        with pytest.raises(ValueError):
            convert_chat_template(template)
