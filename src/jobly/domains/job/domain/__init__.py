"""Job domain layer."""

from .entities import Job, JobFilters
from .repositories import JobStore

__all__ = ["Job", "JobFilters", "JobStore"]
