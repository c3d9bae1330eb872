"""
Database infrastructure components.
"""

from typing import Optional
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
import structlog

from jobly.shared.application.exceptions import (
    ConflictException,
    ConstraintViolationException,
    StoreException,
)

logger = structlog.get_logger(__name__)

# Base model
Base = declarative_base()


class DatabaseManager:
    """Relational database manager backed by an async SQLAlchemy engine."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None
        self._connected = False

    async def connect(self) -> None:
        """Connect to the database and create missing tables."""
        try:
            self._engine = create_async_engine(self.database_url, echo=self.echo)
            self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)

            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            self._connected = True
            logger.info("Database connected successfully", url=self._engine.url.render_as_string())
        except Exception as e:
            logger.error("Failed to connect to database", error=str(e))
            raise

    async def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._engine:
            await self._engine.dispose()
            self._connected = False
            logger.info("Database disconnected")

    @property
    def engine(self) -> AsyncEngine:
        """Get the engine instance."""
        if self._engine is None:
            raise RuntimeError("Database not connected")
        return self._engine

    def session(self) -> AsyncSession:
        """Open a new session; callers use it as an async context manager."""
        if self._session_factory is None:
            raise RuntimeError("Database not connected")
        return self._session_factory()

    async def health_check(self) -> bool:
        """Check database health."""
        if not self._connected or self._engine is None:
            return False

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database health check failed", error=str(e))
            return False


def translate_integrity_error(error: Exception, resource_type: str) -> StoreException:
    """Convert a database integrity error into a store exception.

    The driver message is logged, never surfaced to the caller.
    """
    error_str = str(getattr(error, "orig", error)).lower()
    logger.warning("Integrity error", resource_type=resource_type, error=error_str)

    if "unique constraint" in error_str or "duplicate key" in error_str:
        return ConflictException(resource_type, f"{resource_type} already exists")
    elif "foreign key constraint" in error_str:
        return ConstraintViolationException("Invalid reference to related resource")
    elif "not null constraint" in error_str or "not-null constraint" in error_str:
        return ConstraintViolationException("Required field is missing")
    elif "check constraint" in error_str:
        return ConstraintViolationException("Invalid field value")
    return ConstraintViolationException(f"Invalid {resource_type.lower()} data")
