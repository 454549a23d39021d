"""
FastAPI application factory + lifespan.

Exposes the geometry engine over HTTP for renderers that do not run
in-process:
- POST /api/v1/charts/{chart}/geometry
- GET  /api/v1/system/health
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from chart_geometry import __version__
from chart_geometry.api.v1 import api_router
from chart_geometry.core.cache import geometry_cache
from chart_geometry.core.config import settings
from chart_geometry.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging.
    Shutdown: drop memoized geometry.
    """
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} API ({settings.APP_ENV})")

    yield

    geometry_cache.clear()
    logger.info(f"{settings.APP_NAME} API stopped")


def create_fastapi_app() -> FastAPI:
    """Application factory for FastAPI."""
    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Pie, bar and line chart geometry",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {
            "app": settings.APP_NAME,
            "version": __version__,
            "status": "running",
            "docs": "/api/docs" if settings.DEBUG else "disabled",
        }

    return app


# Module-level instance for ``uvicorn chart_geometry.main:app``
app = create_fastapi_app()
