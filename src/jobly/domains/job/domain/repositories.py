"""
Job store contract.

Implementations own persistence and transactional guarantees; callers issue
exactly one awaited call per operation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .entities import Job, JobFilters


class JobStore(ABC):
    """Abstract persistence boundary for Job entities."""

    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> Job:
        """Insert a job and return it with its assigned id.

        Raises StoreException when a store constraint is violated.
        """

    @abstractmethod
    async def find_all(self, filters: JobFilters) -> List[Job]:
        """Return jobs matching all supplied criteria, possibly none."""

    @abstractmethod
    async def find_by_id(self, job_id: int) -> Job:
        """Return one job. Raises NotFoundException when absent."""

    @abstractmethod
    async def update(self, job_id: int, patch: Dict[str, Any]) -> Job:
        """Apply a partial update and return the merged job.

        Raises NotFoundException when absent.
        """

    @abstractmethod
    async def remove(self, job_id: int) -> None:
        """Delete one job. Raises NotFoundException when absent."""
