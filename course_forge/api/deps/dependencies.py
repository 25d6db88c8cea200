"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived clients (LLM,
Eraser, result store) are built once and cached; services are cheap
wrappers created per request.

Dependencies: course_forge.configs, course_forge.application, course_forge.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from course_forge.application.services import (
    DiagramService,
    GenerationService,
    SavedContentService,
)
from course_forge.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._llm_client = None
        self._pipeline = None
        self._eraser_client = None
        self._result_store = None

    @property
    def llm_client(self):
        """Get cached structured LLM client (the provider model is built on first call)."""
        if self._llm_client is None:
            from course_forge.boundary.llm import create_llm_client
            self._llm_client = create_llm_client(get_settings().llm)
        return self._llm_client

    @property
    def pipeline(self):
        """Get cached generation pipeline."""
        if self._pipeline is None:
            from course_forge.core.generation_pipeline import GenerationPipeline

            settings = get_settings()
            self._pipeline = GenerationPipeline(
                llm_client=self.llm_client,
                retry_settings=settings.retry,
                include_text_diagram=settings.llm.include_text_diagram,
                reconcile=settings.llm.reconcile_stages,
                use_prompt_registry=settings.llm.use_prompt_registry,
                prompt_label=settings.llm.prompt_label,
            )
        return self._pipeline

    @property
    def eraser_client(self):
        """Get cached Eraser client."""
        if self._eraser_client is None:
            from course_forge.boundary.eraser import create_eraser_client
            self._eraser_client = create_eraser_client(get_settings().diagram)
        return self._eraser_client

    @property
    def result_store(self):
        """Get cached result store."""
        if self._result_store is None:
            from course_forge.boundary.store import get_result_store
            self._result_store = get_result_store(get_settings().storage)
        return self._result_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._llm_client = None
        self._pipeline = None
        self._eraser_client = None
        self._result_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_generation_service(
    cache: ServiceCache = Depends(get_service_cache),
) -> GenerationService:
    """
    Get generation service instance.

    Args:
        cache: Service cache (injected via Depends)

    Returns:
        GenerationService: Service wrapping the cached pipeline
    """
    return GenerationService(pipeline=cache.pipeline)


def get_diagram_service(
    cache: ServiceCache = Depends(get_service_cache),
    settings: Settings = Depends(get_settings_dependency),
) -> DiagramService:
    """
    Get diagram service instance.

    Returns:
        DiagramService: Service wrapping the cached Eraser client
    """
    return DiagramService(
        client=cache.eraser_client,
        max_concurrency=settings.diagram.max_concurrency,
        excerpt_chars=settings.diagram.prompt_excerpt_chars,
    )


def get_saved_content_service(
    cache: ServiceCache = Depends(get_service_cache),
) -> SavedContentService:
    """
    Get saved content service instance.

    Returns:
        SavedContentService: Service wrapping the cached result store
    """
    return SavedContentService(store=cache.result_store)
