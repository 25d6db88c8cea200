"""Pipeline run state machine.

Idle -> Outline -> Questions -> Content -> (Diagram ->) Complete, with
Failed reachable from any running state. A run records every state it
enters so callers and logs can see how far a generation got.

Dependencies: dataclasses, pipeline_schema
System role: State tracking for one generation invocation
"""

from dataclasses import dataclass, field

from course_forge.core.generation_pipeline.pipeline_schema import (
    GenerationResult,
    PipelineStage,
)

RUNNING_STAGES = frozenset({
    PipelineStage.OUTLINE,
    PipelineStage.QUESTIONS,
    PipelineStage.CONTENT,
    PipelineStage.DIAGRAM,
})

ALLOWED_TRANSITIONS: dict[PipelineStage, frozenset[PipelineStage]] = {
    PipelineStage.IDLE: frozenset({PipelineStage.OUTLINE}),
    PipelineStage.OUTLINE: frozenset({PipelineStage.QUESTIONS, PipelineStage.FAILED}),
    PipelineStage.QUESTIONS: frozenset({PipelineStage.CONTENT, PipelineStage.FAILED}),
    PipelineStage.CONTENT: frozenset({
        PipelineStage.DIAGRAM,
        PipelineStage.COMPLETE,
        PipelineStage.FAILED,
    }),
    PipelineStage.DIAGRAM: frozenset({PipelineStage.COMPLETE, PipelineStage.FAILED}),
    PipelineStage.COMPLETE: frozenset(),
    PipelineStage.FAILED: frozenset(),
}


@dataclass
class PipelineRun:
    """Mutable record of one pipeline invocation."""

    stage: PipelineStage = PipelineStage.IDLE
    history: list[PipelineStage] = field(default_factory=lambda: [PipelineStage.IDLE])
    failed_stage: PipelineStage | None = None
    error: Exception | None = None
    result: GenerationResult | None = None

    def advance(self, to: PipelineStage) -> None:
        """Move to ``to``; raises RuntimeError on a transition the machine does not allow."""
        if to not in ALLOWED_TRANSITIONS[self.stage]:
            raise RuntimeError(f"Illegal pipeline transition {self.stage.value} -> {to.value}")
        self.stage = to
        self.history.append(to)

    def fail(self, error: Exception) -> None:
        """Record a failure in the current running stage."""
        self.failed_stage = self.stage if self.stage in RUNNING_STAGES else None
        self.error = error
        self.advance(PipelineStage.FAILED)

    @property
    def is_running(self) -> bool:
        return self.stage in RUNNING_STAGES
