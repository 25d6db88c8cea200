"""Generation pipeline schemas and schema validation.

This module defines:
- Pydantic models for each stage's structured output (Outline, QuestionSet,
  ContentBundle) and the aggregated GenerationResult
- The PipelineStage enum naming every state of a pipeline run
- TypedDict schema for LangGraph state management
- Structural validation of raw model output against a stage's schema

Wire format uses camelCase aliases (chapterTitle, questionSet, ...);
Python attributes stay snake_case.

Dependencies: pydantic, typing, course_forge.core.exceptions
System role: Data schemas and validation for the generation pipeline
"""

from enum import Enum
from typing import Annotated, Any, Mapping, TypedDict

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from course_forge.core.exceptions import SchemaViolationError


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class PipelineStage(str, Enum):
    """States of one generation pipeline run."""

    IDLE = "idle"
    OUTLINE = "outline"
    QUESTIONS = "questions"
    CONTENT = "content"
    DIAGRAM = "diagram"
    COMPLETE = "complete"
    FAILED = "failed"


class StageModel(BaseModel):
    """Immutable stage output with camelCase wire aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class OutlineTopic(StageModel):
    """A chapter of the outline with its subtopics."""

    title: NonBlankStr = Field(description="Chapter title")
    subtopics: list[NonBlankStr] = Field(
        min_length=1,
        description="Subtopic titles within this chapter, in order",
    )


class Outline(StageModel):
    """Stage 1 output: the title/topics/subtopics decomposition of the subject."""

    title: NonBlankStr = Field(description="Title of the course or book")
    topics: list[OutlineTopic] = Field(
        min_length=1,
        description="Chapters in learning order",
    )


class QuestionGroup(StageModel):
    """Interview questions for one subtopic."""

    subtopic: str = Field(description="Subtopic name as it appears in the outline")
    questions: list[str] = Field(description="Interview questions for the subtopic")


class QuestionSet(StageModel):
    """Stage 2 output: interview questions grouped by subtopic."""

    questions: list[QuestionGroup] = Field(description="One group per outline subtopic")


class SubtopicContent(StageModel):
    """Long-form exposition of one subtopic."""

    title: str = Field(description="Subtopic title")
    content: str = Field(description="Subtopic body text")


class ContentSection(StageModel):
    """Long-form chapter with its subtopic expositions."""

    chapter_title: str = Field(description="Chapter title")
    chapter_content: str = Field(description="Chapter body text")
    subtopics: list[SubtopicContent] = Field(description="Subtopic expositions in order")


class ContentBundle(StageModel):
    """Stage 3 output: one section per outline topic."""

    sections: list[ContentSection] = Field(description="Chapters in outline order")


class GenerationResult(StageModel):
    """Aggregate returned by one pipeline invocation."""

    outline: Outline
    question_set: QuestionSet
    content_bundle: ContentBundle
    diagram: str | None = Field(
        default=None,
        description="Plain-text diagram of the outline (opaque, not validated)",
    )


class GenerationState(TypedDict, total=False):
    """LangGraph state schema for the generation pipeline.

    TypedDict with total=False so each node returns only the keys it adds.
    """

    # Pipeline inputs
    input: str
    include_diagram: bool

    # Stage outputs
    outline: Outline
    question_set: QuestionSet
    content_bundle: ContentBundle
    diagram: str | None


STAGE_SCHEMAS: dict[PipelineStage, type[StageModel]] = {
    PipelineStage.OUTLINE: Outline,
    PipelineStage.QUESTIONS: QuestionSet,
    PipelineStage.CONTENT: ContentBundle,
}


def stage_json_schema(stage: PipelineStage) -> dict[str, Any]:
    """JSON schema (camelCase) the model is asked to produce for a stage."""
    return STAGE_SCHEMAS[stage].model_json_schema(by_alias=True)


def validate_stage_output(stage: PipelineStage, raw: Any) -> StageModel:
    """Validate raw model output against the stage's schema.

    Accepts an untyped mapping or an already-typed instance; typed input is
    re-validated from its dump, so the returned value equals the input and
    the input is never mutated.

    Raises:
        SchemaViolationError: If the output is structurally invalid
        KeyError: If the stage has no schema (diagram, terminal states)
    """
    schema = STAGE_SCHEMAS[stage]
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(by_alias=True)
    if not isinstance(raw, Mapping):
        raise SchemaViolationError(
            stage.value,
            details={"received_type": type(raw).__name__},
        )
    try:
        return schema.model_validate(raw)
    except ValidationError as e:
        raise SchemaViolationError(
            stage.value,
            errors=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


def validate_outline(raw: Any) -> Outline:
    """Validate stage 1 output."""
    return validate_stage_output(PipelineStage.OUTLINE, raw)


def validate_questions(raw: Any) -> QuestionSet:
    """Validate stage 2 output."""
    return validate_stage_output(PipelineStage.QUESTIONS, raw)


def validate_content(raw: Any) -> ContentBundle:
    """Validate stage 3 output."""
    return validate_stage_output(PipelineStage.CONTENT, raw)
