"""Job store implementations."""

from .models import JobModel
from .sql_job_repository import SQLJobRepository

__all__ = ["JobModel", "SQLJobRepository"]
