"""
SQLAlchemy implementation of the job store.

Each call runs in its own session and transaction.
"""

from typing import Any, Dict, List
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
import structlog

from jobly.domains.job.domain.entities import Job, JobFilters
from jobly.domains.job.domain.repositories import JobStore
from jobly.shared.application.exceptions import NotFoundException
from jobly.shared.infrastructure.database import DatabaseManager, translate_integrity_error
from .models import JobModel


logger = structlog.get_logger(__name__)

MUTABLE_COLUMNS = ("title", "salary", "equity", "company_handle")


def escape_like(value: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so user text matches literally."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )


class SQLJobRepository(JobStore):
    """Job store backed by a relational database."""

    def __init__(self, database: DatabaseManager):
        self.database = database

    async def create(self, data: Dict[str, Any]) -> Job:
        values = {column: data.get(column) for column in MUTABLE_COLUMNS}

        async with self.database.session() as session:
            row = JobModel(**values)
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise translate_integrity_error(e, "Job") from e
            return row.to_entity()

    async def find_all(self, filters: JobFilters) -> List[Job]:
        stmt = select(JobModel)

        if filters.min_salary is not None:
            stmt = stmt.where(JobModel.salary >= filters.min_salary)
        if filters.has_equity:
            stmt = stmt.where(JobModel.equity > 0)
        if filters.name_like is not None:
            pattern = f"%{escape_like(filters.name_like)}%"
            stmt = stmt.where(JobModel.title.ilike(pattern, escape="\\"))

        stmt = stmt.order_by(JobModel.title, JobModel.id)

        async with self.database.session() as session:
            result = await session.execute(stmt)
            return [row.to_entity() for row in result.scalars().all()]

    async def find_by_id(self, job_id: int) -> Job:
        async with self.database.session() as session:
            row = await session.get(JobModel, job_id)
            if row is None:
                raise NotFoundException("Job", job_id)
            return row.to_entity()

    async def update(self, job_id: int, patch: Dict[str, Any]) -> Job:
        async with self.database.session() as session:
            row = await session.get(JobModel, job_id)
            if row is None:
                raise NotFoundException("Job", job_id)

            for column, value in patch.items():
                if column not in MUTABLE_COLUMNS:
                    raise ValueError(f"Column {column!r} cannot be updated")
                setattr(row, column, value)

            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise translate_integrity_error(e, "Job") from e
            return row.to_entity()

    async def remove(self, job_id: int) -> None:
        async with self.database.session() as session:
            row = await session.get(JobModel, job_id)
            if row is None:
                raise NotFoundException("Job", job_id)

            await session.delete(row)
            await session.commit()
