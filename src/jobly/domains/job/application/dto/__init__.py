"""Job input schemas."""

from .job_dto import JobNewDTO, JobUpdateDTO, JobQueryDTO, parse_equity

__all__ = ["JobNewDTO", "JobUpdateDTO", "JobQueryDTO", "parse_equity"]
