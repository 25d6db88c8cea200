"""Content generation service layer.

Coordinates between the API layer and the generation pipeline.

Dependencies: logging, generation pipeline
System role: Service layer for the content generation feature
"""

import logging
from typing import Any

from course_forge.core.generation_pipeline import (
    GenerationPipeline,
    GenerationResult,
    PipelineRun,
)

logger = logging.getLogger(__name__)


class GenerationService:
    """Service for generating course bundles from a subject."""

    def __init__(self, pipeline: GenerationPipeline) -> None:
        self._pipeline = pipeline

    async def generate(self, input: Any, include_diagram: bool | None = None) -> GenerationResult:
        """Run the pipeline once.

        Raises:
            InvalidInputError: If input is not a non-empty string
            PipelineError: If any stage fails
        """
        run = PipelineRun()
        try:
            return await self._pipeline.generate(input, include_diagram=include_diagram, run=run)
        finally:
            logger.info(
                f"{__name__}:generate - run ended stage={run.stage.value}, "
                f"history={[stage.value for stage in run.history]}"
            )
