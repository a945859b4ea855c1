"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, cast

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogwise.api.v1.router import api_router
from blogwise.config import settings
from blogwise.core.database import close_db, init_db
from blogwise.core.logging import setup_logging
from blogwise.services.generation_jobs import get_generation_job_tracker
from blogwise.workers.job_reaper import JobReaper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    setup_logging()

    logger.info(
        "Starting Blogwise",
        extra={
            "environment": settings.environment,
            "version": settings.app_version,
            "model": settings.default_llm_model,
            "dataforseo_enabled": settings.dataforseo_enabled,
        },
    )

    if settings.environment == "development":
        await init_db()
        logger.info("Development database initialized")

    reaper = JobReaper(tracker=get_generation_job_tracker())
    await reaper.start()
    app.state.job_reaper = reaper

    yield

    logger.info("Shutting down Blogwise")
    await reaper.stop()
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "Content pipeline backend: trend discovery, revenue ranking, duplicate "
            "guarding, generation jobs and internal linking"
        ),
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        cast(Any, CORSMiddleware),
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get(
        "/health",
        summary="Health check",
        description="Return service health status and backend version information.",
    )
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        tracker = get_generation_job_tracker()
        active = tracker.active_job()
        return {
            "status": "healthy",
            "version": settings.app_version,
            "jobs": len(tracker.list_jobs()),
            "active_job": active.id if active is not None else None,
        }

    return app


app = create_app()
