"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, course_forge.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_forge import __version__
from course_forge.api.deps.dependencies import get_service_cache
from course_forge.configs import get_settings
from course_forge.core.generation_pipeline.pipeline_prompt import register_stage_prompts
from course_forge.observability import configure_logging
from course_forge.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    diagrams_router,
    generation_router,
    health_router,
    saved_contents_router,
)

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")
    settings = get_settings()

    # Startup
    if settings.llm.use_prompt_registry:
        logger.info("Registering stage prompts with Langfuse...")
        register_stage_prompts(
            settings.llm.model_id,
            settings.llm.temperature,
            labels=settings.observability.prompt_labels,
        )

    cache = get_service_cache()
    # Only the store is pre-warmed; provider clients check credentials per request
    _ = cache.result_store
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Course Forge API",
        description="Staged LLM course generation with on-demand diagrams",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(generation_router, prefix="/api/v1")
    app.include_router(diagrams_router, prefix="/api/v1")
    app.include_router(saved_contents_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "course_forge.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
