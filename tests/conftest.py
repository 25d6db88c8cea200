"""
Shared test fixtures and configuration for entire test suite.

Provides: stage output samples, a GenerationResult, LLM client mocks
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

import copy
from unittest.mock import AsyncMock, MagicMock

import pytest

from course_forge.core.generation_pipeline import GenerationResult

OUTLINE_RAW = {
    "title": "Intro to Linear Algebra",
    "topics": [
        {"title": "Vectors", "subtopics": ["Vector Addition", "Dot Product"]},
        {"title": "Matrices", "subtopics": ["Matrix Multiplication"]},
    ],
}

QUESTIONS_RAW = {
    "questions": [
        {"subtopic": "Vector Addition", "questions": ["What is a vector?", "How do you add vectors?"]},
        {"subtopic": "Dot Product", "questions": ["What does the dot product measure?"]},
        {"subtopic": "Matrix Multiplication", "questions": ["When is AB defined?"]},
    ]
}

CONTENT_RAW = {
    "sections": [
        {
            "chapterTitle": "Vectors",
            "chapterContent": "Vectors are quantities with magnitude and direction.",
            "subtopics": [
                {"title": "Vector Addition", "content": "Add componentwise."},
                {"title": "Dot Product", "content": "Sum of componentwise products."},
            ],
        },
        {
            "chapterTitle": "Matrices",
            "chapterContent": "Matrices are rectangular arrays of numbers.",
            "subtopics": [
                {"title": "Matrix Multiplication", "content": "Rows times columns."},
            ],
        },
    ]
}

TEXT_DIAGRAM = "+------------------------+\n| Intro to Linear Algebra |\n+------------------------+"


@pytest.fixture
def outline_raw() -> dict:
    return copy.deepcopy(OUTLINE_RAW)


@pytest.fixture
def questions_raw() -> dict:
    return copy.deepcopy(QUESTIONS_RAW)


@pytest.fixture
def content_raw() -> dict:
    return copy.deepcopy(CONTENT_RAW)


@pytest.fixture
def generation_result() -> GenerationResult:
    """Complete result for the linear algebra sample (2 topics, 3 groups, 2 chapters)."""
    return GenerationResult.model_validate({
        "outline": OUTLINE_RAW,
        "questionSet": QUESTIONS_RAW,
        "contentBundle": CONTENT_RAW,
        "diagram": TEXT_DIAGRAM,
    })


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """
    Create mock StructuredLLMClient answering the three structured stages in order.

    Returns:
        MagicMock: Client with async agenerate_structured/agenerate_text
    """
    client = MagicMock()
    client.agenerate_structured = AsyncMock(
        side_effect=[copy.deepcopy(OUTLINE_RAW), copy.deepcopy(QUESTIONS_RAW), copy.deepcopy(CONTENT_RAW)]
    )
    client.agenerate_text = AsyncMock(return_value=TEXT_DIAGRAM)
    return client
