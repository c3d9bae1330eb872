"""Job domain entities."""

from .job import MAX_HANDLE_LENGTH, MAX_INTEGER, Job, JobFilters

__all__ = ["MAX_HANDLE_LENGTH", "MAX_INTEGER", "Job", "JobFilters"]
