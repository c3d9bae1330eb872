"""
Dependency injection container for the application.
"""

from typing import Optional
from fastapi import Request
import structlog

from jobly.config.settings import Settings
from jobly.shared.infrastructure.database import DatabaseManager
from jobly.shared.infrastructure.security.authentication import JWTManager

from jobly.domains.job.domain.repositories import JobStore
from jobly.domains.job.infrastructure.repositories import SQLJobRepository
from jobly.domains.job.application.services import JobResourceHandler


logger = structlog.get_logger(__name__)


class Container:
    """Builds and owns the collaborators of one application instance.

    When a store is passed in it is used as-is and no database is opened.
    """

    def __init__(self, settings: Settings, store: Optional[JobStore] = None):
        self._settings = settings
        self._store = store
        self.database_manager: Optional[DatabaseManager] = None
        self.jwt_manager = JWTManager(settings)
        self._job_handler: Optional[JobResourceHandler] = None

    async def initialize(self) -> None:
        """Initialize the container and all services."""
        logger.info("Initializing dependency container")

        if self._store is None:
            self.database_manager = DatabaseManager(
                self._settings.database.database_url,
                echo=self._settings.database.database_echo,
            )
            await self.database_manager.connect()
            self._store = SQLJobRepository(self.database_manager)

        self._job_handler = JobResourceHandler(self._store)
        logger.info("Dependency container initialized", store=type(self._store).__name__)

    async def cleanup(self) -> None:
        """Cleanup all services and connections."""
        logger.info("Cleaning up dependency container")

        if self.database_manager:
            await self.database_manager.disconnect()
            self.database_manager = None
        self._job_handler = None

    @property
    def job_handler(self) -> JobResourceHandler:
        if self._job_handler is None:
            raise RuntimeError("Container not initialized")
        return self._job_handler

    async def health_check(self) -> bool:
        if self.database_manager is None:
            return self._job_handler is not None
        return await self.database_manager.health_check()


def get_container(request: Request) -> Container:
    """FastAPI dependency returning the application's container."""
    return request.app.state.container


def get_job_handler(request: Request) -> JobResourceHandler:
    """FastAPI dependency returning the job resource handler."""
    return get_container(request).job_handler
