"""Staged generation pipeline: schemas, prompts, reconciliation and orchestration."""

from course_forge.core.generation_pipeline.generation_pipeline import GenerationPipeline
from course_forge.core.generation_pipeline.pipeline_run import PipelineRun
from course_forge.core.generation_pipeline.pipeline_schema import (
    ContentBundle,
    ContentSection,
    GenerationResult,
    Outline,
    OutlineTopic,
    PipelineStage,
    QuestionGroup,
    QuestionSet,
    SubtopicContent,
    validate_content,
    validate_outline,
    validate_questions,
    validate_stage_output,
)
from course_forge.core.generation_pipeline.reconciliation import (
    ReconciliationIssue,
    reconcile_bundle,
)

__all__ = [
    "ContentBundle",
    "ContentSection",
    "GenerationPipeline",
    "GenerationResult",
    "Outline",
    "OutlineTopic",
    "PipelineRun",
    "PipelineStage",
    "QuestionGroup",
    "QuestionSet",
    "ReconciliationIssue",
    "SubtopicContent",
    "reconcile_bundle",
    "validate_content",
    "validate_outline",
    "validate_questions",
    "validate_stage_output",
]
