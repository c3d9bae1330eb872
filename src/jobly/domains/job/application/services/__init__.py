"""Job application services."""

from .job_resource_handler import JobResourceHandler, parse_job_id

__all__ = ["JobResourceHandler", "parse_job_id"]
