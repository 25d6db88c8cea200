"""Tests for stage schemas and the schema validator."""

import copy

import pytest

from course_forge.core.exceptions import SchemaViolationError, UpstreamError
from course_forge.core.generation_pipeline.pipeline_schema import (
    ContentBundle,
    Outline,
    PipelineStage,
    QuestionSet,
    stage_json_schema,
    validate_content,
    validate_outline,
    validate_questions,
    validate_stage_output,
)


class TestValidateOutline:
    """Tests for outline validation."""

    def test_valid_outline(self, outline_raw: dict) -> None:
        outline = validate_outline(outline_raw)

        assert isinstance(outline, Outline)
        assert outline.title == "Intro to Linear Algebra"
        assert len(outline.topics) == 2
        assert all(topic.subtopics for topic in outline.topics)

    def test_empty_topics_rejected(self, outline_raw: dict) -> None:
        outline_raw["topics"] = []
        with pytest.raises(SchemaViolationError) as exc_info:
            validate_outline(outline_raw)
        assert exc_info.value.stage == "outline"
        assert exc_info.value.errors

    def test_topic_without_subtopics_rejected(self, outline_raw: dict) -> None:
        outline_raw["topics"][0]["subtopics"] = []
        with pytest.raises(SchemaViolationError):
            validate_outline(outline_raw)

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_rejected(self, outline_raw: dict, title: str) -> None:
        outline_raw["title"] = title
        with pytest.raises(SchemaViolationError):
            validate_outline(outline_raw)

    def test_blank_subtopic_rejected(self, outline_raw: dict) -> None:
        outline_raw["topics"][1]["subtopics"] = [""]
        with pytest.raises(SchemaViolationError):
            validate_outline(outline_raw)

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(SchemaViolationError):
            validate_outline({"topics": []})

    @pytest.mark.parametrize("raw", [None, "not json", ["a", "b"], 42])
    def test_non_mapping_rejected(self, raw) -> None:
        with pytest.raises(SchemaViolationError) as exc_info:
            validate_outline(raw)
        assert "received_type" in exc_info.value.details

    def test_schema_violation_is_upstream_error(self) -> None:
        with pytest.raises(UpstreamError) as exc_info:
            validate_outline({})
        assert exc_info.value.service == "llm"


class TestValidateQuestionsAndContent:
    """Tests for question set and content bundle validation."""

    def test_valid_questions(self, questions_raw: dict) -> None:
        question_set = validate_questions(questions_raw)

        assert isinstance(question_set, QuestionSet)
        assert [g.subtopic for g in question_set.questions] == [
            "Vector Addition",
            "Dot Product",
            "Matrix Multiplication",
        ]

    def test_question_count_is_not_enforced(self, questions_raw: dict) -> None:
        questions_raw["questions"][0]["questions"] = ["only one"]
        assert validate_questions(questions_raw).questions[0].questions == ["only one"]

    def test_questions_wrong_type_rejected(self, questions_raw: dict) -> None:
        questions_raw["questions"][0]["questions"] = "not a list"
        with pytest.raises(SchemaViolationError) as exc_info:
            validate_questions(questions_raw)
        assert exc_info.value.stage == "questions"

    def test_valid_content_uses_camel_case(self, content_raw: dict) -> None:
        bundle = validate_content(content_raw)

        assert isinstance(bundle, ContentBundle)
        assert bundle.sections[0].chapter_title == "Vectors"
        assert bundle.sections[0].subtopics[1].title == "Dot Product"

    def test_content_snake_case_input_accepted(self, content_raw: dict) -> None:
        section = content_raw["sections"][0]
        section["chapter_title"] = section.pop("chapterTitle")
        section["chapter_content"] = section.pop("chapterContent")
        assert validate_content(content_raw).sections[0].chapter_title == "Vectors"

    def test_content_missing_chapter_content_rejected(self, content_raw: dict) -> None:
        del content_raw["sections"][1]["chapterContent"]
        with pytest.raises(SchemaViolationError) as exc_info:
            validate_content(content_raw)
        assert exc_info.value.stage == "content"


class TestRevalidation:
    """Re-validating an already valid value succeeds and returns an equal value."""

    @pytest.mark.parametrize(
        "stage, fixture_name",
        [
            (PipelineStage.OUTLINE, "outline_raw"),
            (PipelineStage.QUESTIONS, "questions_raw"),
            (PipelineStage.CONTENT, "content_raw"),
        ],
    )
    def test_revalidation_is_idempotent(self, request, stage: PipelineStage, fixture_name: str) -> None:
        raw = request.getfixturevalue(fixture_name)
        snapshot = copy.deepcopy(raw)

        first = validate_stage_output(stage, raw)
        second = validate_stage_output(stage, first)

        assert second == first
        assert raw == snapshot

    def test_stage_models_are_frozen(self, outline_raw: dict) -> None:
        outline = validate_outline(outline_raw)
        with pytest.raises(Exception):
            outline.title = "changed"


class TestStageJsonSchema:
    """Tests for the JSON schema sent to the model."""

    def test_content_schema_uses_camel_case(self) -> None:
        schema = stage_json_schema(PipelineStage.CONTENT)
        section_schema = schema["$defs"]["ContentSection"]

        assert "chapterTitle" in section_schema["properties"]
        assert "chapterContent" in section_schema["properties"]

    def test_outline_schema_requires_topics(self) -> None:
        schema = stage_json_schema(PipelineStage.OUTLINE)
        assert set(schema["required"]) == {"title", "topics"}

    def test_diagram_stage_has_no_schema(self) -> None:
        with pytest.raises(KeyError):
            stage_json_schema(PipelineStage.DIAGRAM)
