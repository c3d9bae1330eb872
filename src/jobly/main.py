"""
Jobly API - Main Application
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config.settings import Settings, get_settings
from .domains.job.domain.repositories import JobStore
from .interfaces.api import create_api_router, register_error_handlers
from .interfaces.api.v1.job_endpoints import router as job_router
from .shared.infrastructure.container import Container
from .shared.infrastructure.monitoring import RequestContextMiddleware, setup_structured_logging


logger = structlog.get_logger(__name__)


def create_application(settings: Optional[Settings] = None, store: Optional[JobStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``store`` replaces the database-backed job store, e.g. in tests.
    """
    settings = settings or get_settings()
    setup_structured_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management."""
        logger.info("Starting Jobly API", version=settings.app_version, environment=settings.app_environment)

        container = Container(settings, store=store)
        await container.initialize()
        app.state.container = container

        logger.info("Application startup completed successfully")

        yield

        logger.info("Shutting down application")
        await container.cleanup()
        logger.info("Application shutdown completed")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.app_debug,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.allowed_origins_list,
        allow_credentials=True,
        allow_methods=settings.security.allowed_methods_list,
        allow_headers=settings.security.allowed_headers_list,
    )
    app.add_middleware(RequestContextMiddleware)

    # Jobs at the root and under the versioned API prefix
    app.include_router(job_router)
    app.include_router(create_api_router(), prefix="/api")

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Application health check."""
        healthy = await app.state.container.health_check()
        return {
            "status": "healthy" if healthy else "unhealthy",
            "version": settings.app_version,
            "environment": settings.app_environment,
        }

    return app


if __name__ == "__main__":
    settings = get_settings()

    logger.info(
        "Starting server",
        host=settings.app_host,
        port=settings.app_port,
        environment=settings.app_environment
    )

    uvicorn.run(
        "jobly.main:create_application",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.monitoring.log_level.lower(),
        reload=settings.is_development,
    )
