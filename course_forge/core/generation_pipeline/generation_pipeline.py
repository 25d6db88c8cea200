"""Staged course generation pipeline.

Runs the outline, question, content and optional diagram stages in strict
order. Later stages only ever see the validated Outline, so questions and
content are anchored to the same decomposition of the subject.

Each stage call goes through an explicit tenacity retry policy
(RetrySettings). The default policy makes a single attempt.

Dependencies: langgraph, tenacity, structured LLM client, pipeline schema/prompt
System role: Core orchestrator for content generation
"""

import logging
from typing import Any, Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from course_forge.boundary.llm import StructuredLLMClient
from course_forge.configs.retry import RetrySettings
from course_forge.core.exceptions import (
    InvalidInputError,
    PipelineError,
    SchemaViolationError,
    UpstreamError,
)
from course_forge.core.generation_pipeline.pipeline_graph import create_generation_graph
from course_forge.core.generation_pipeline.pipeline_prompt import build_stage_messages
from course_forge.core.generation_pipeline.pipeline_run import PipelineRun
from course_forge.core.generation_pipeline.pipeline_schema import (
    GenerationResult,
    GenerationState,
    PipelineStage,
    stage_json_schema,
    validate_content,
    validate_outline,
    validate_questions,
)
from course_forge.core.generation_pipeline.reconciliation import reconcile_bundle
from course_forge.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GenerationPipeline:
    """Turns a free-text subject into outline, questions, content and diagram."""

    def __init__(
        self,
        llm_client: StructuredLLMClient,
        retry_settings: RetrySettings | None = None,
        include_text_diagram: bool = True,
        reconcile: bool = True,
        use_prompt_registry: bool = False,
        prompt_label: str | None = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            llm_client: Client used for every stage call
            retry_settings: Retry policy (defaults to a single attempt)
            include_text_diagram: Default for include_diagram when the caller passes None
            reconcile: Log outline/question/content mismatches after stage 3
            use_prompt_registry: Fetch stage prompts from Langfuse
            prompt_label: Registry label to fetch
        """
        self._llm = llm_client
        self._retry = retry_settings or RetrySettings()
        self._include_text_diagram = include_text_diagram
        self._reconcile = reconcile
        self._use_registry = use_prompt_registry
        self._prompt_label = prompt_label

    def _should_retry(self, exc: BaseException) -> bool:
        if isinstance(exc, SchemaViolationError):
            return self._retry.retry_on_schema_violation
        return isinstance(exc, UpstreamError)

    async def _call_with_retry(self, stage: PipelineStage, call: Callable[[], Awaitable[T]]) -> T:
        """Run one stage call under the configured retry policy."""
        max_attempts = self._retry.max_attempts

        def _log_retry(retry_state) -> None:
            logger.warning(
                f"{__name__}:_call_with_retry - stage={stage.value} "
                f"retry {retry_state.attempt_number}/{max_attempts} after "
                f"{type(retry_state.outcome.exception()).__name__}"
            )

        async for attempt in AsyncRetrying(
            retry=retry_if_exception(self._should_retry),
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential_jitter(
                initial=self._retry.initial_wait,
                max=self._retry.max_wait,
                jitter=self._retry.jitter,
            ),
            before_sleep=_log_retry,
            reraise=True,
        ):
            with attempt:
                return await call()
        raise RuntimeError("unreachable")  # pragma: no cover

    def _messages(self, stage: PipelineStage, **inputs: Any):
        return build_stage_messages(
            stage,
            use_registry=self._use_registry,
            label=self._prompt_label,
            **inputs,
        )

    async def generate_outline(self, subject: str):
        """Stage 1: subject -> validated Outline."""
        messages = self._messages(PipelineStage.OUTLINE, subject=subject)
        schema = stage_json_schema(PipelineStage.OUTLINE)

        async def call():
            raw = await self._llm.agenerate_structured(messages, schema)
            return validate_outline(raw)

        return await self._call_with_retry(PipelineStage.OUTLINE, call)

    async def generate_questions(self, outline):
        """Stage 2: Outline -> validated QuestionSet."""
        messages = self._messages(PipelineStage.QUESTIONS, outline=outline)
        schema = stage_json_schema(PipelineStage.QUESTIONS)

        async def call():
            raw = await self._llm.agenerate_structured(messages, schema)
            return validate_questions(raw)

        return await self._call_with_retry(PipelineStage.QUESTIONS, call)

    async def generate_content(self, outline):
        """Stage 3: Outline -> validated ContentBundle."""
        messages = self._messages(PipelineStage.CONTENT, outline=outline)
        schema = stage_json_schema(PipelineStage.CONTENT)

        async def call():
            raw = await self._llm.agenerate_structured(messages, schema)
            return validate_content(raw)

        return await self._call_with_retry(PipelineStage.CONTENT, call)

    async def generate_diagram(self, outline) -> str:
        """Stage 4: Outline -> plain-text diagram (opaque text)."""
        messages = self._messages(PipelineStage.DIAGRAM, outline=outline)
        return await self._call_with_retry(
            PipelineStage.DIAGRAM,
            lambda: self._llm.agenerate_text(messages),
        )

    def _build_graph(self, run: PipelineRun):
        """Compile the stage graph with nodes bound to this run."""

        def _stage_node(stage: PipelineStage, produce):
            async def node(state: GenerationState) -> dict[str, Any]:
                run.advance(stage)
                logger.info(f"{__name__}:generate - stage={stage.value} START")
                try:
                    update = await produce(state)
                except Exception as e:
                    logger.error(
                        f"{__name__}:generate - stage={stage.value} FAILED: "
                        f"{type(e).__name__}: {e}"
                    )
                    run.fail(e)
                    raise PipelineError(stage.value, e) from e
                logger.info(f"{__name__}:generate - stage={stage.value} OK")
                return update

            return node

        async def outline(state: GenerationState) -> dict[str, Any]:
            return {"outline": await self.generate_outline(state["input"])}

        async def questions(state: GenerationState) -> dict[str, Any]:
            return {"question_set": await self.generate_questions(state["outline"])}

        async def content(state: GenerationState) -> dict[str, Any]:
            return {"content_bundle": await self.generate_content(state["outline"])}

        async def diagram(state: GenerationState) -> dict[str, Any]:
            return {"diagram": await self.generate_diagram(state["outline"])}

        return create_generation_graph(
            outline_node=_stage_node(PipelineStage.OUTLINE, outline),
            questions_node=_stage_node(PipelineStage.QUESTIONS, questions),
            content_node=_stage_node(PipelineStage.CONTENT, content),
            diagram_node=_stage_node(PipelineStage.DIAGRAM, diagram),
        )

    def _log_reconciliation(self, result: GenerationResult) -> None:
        """Log cross-stage mismatches; the check is advisory and never fails a run."""
        try:
            issues = reconcile_bundle(result.outline, result.question_set, result.content_bundle)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_log_reconciliation - Reconciliation check failed",
                e,
                topics=result.outline.topics,
            )
            return
        for issue in issues:
            logger.warning(f"{__name__}:generate - reconciliation: {issue}")

    async def generate(
        self,
        input: Any,
        include_diagram: bool | None = None,
        run: PipelineRun | None = None,
    ) -> GenerationResult:
        """
        Run the full pipeline for a subject.

        Args:
            input: Free-text subject; must be a non-empty string
            include_diagram: Run the diagram stage (None uses the configured default)
            run: Optional run record to observe stage transitions

        Returns:
            GenerationResult: Outline, questions, content and optional diagram

        Raises:
            InvalidInputError: If input is not a non-empty string (no LLM call is made)
            PipelineError: If any stage fails; .stage names it, .cause holds the
                error (UpstreamError, SchemaViolationError or ConfigurationError)
        """
        if not isinstance(input, str) or not input.strip():
            raise InvalidInputError("Input must be a non-empty string", field="input")

        if include_diagram is None:
            include_diagram = self._include_text_diagram
        run = run or PipelineRun()

        logger.info(
            f"{__name__}:generate - START input_len={len(input)}, "
            f"include_diagram={include_diagram}"
        )

        graph = self._build_graph(run)
        initial: GenerationState = {"input": input, "include_diagram": include_diagram}
        final_state = await graph.ainvoke(initial)

        result = GenerationResult(
            outline=final_state["outline"],
            question_set=final_state["question_set"],
            content_bundle=final_state["content_bundle"],
            diagram=final_state.get("diagram") if include_diagram else None,
        )

        if self._reconcile:
            self._log_reconciliation(result)

        run.advance(PipelineStage.COMPLETE)
        run.result = result
        logger.info(
            f"{__name__}:generate - COMPLETE topics={len(result.outline.topics)}, "
            f"sections={len(result.content_bundle.sections)}"
        )
        return result
