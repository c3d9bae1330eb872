"""
Job resource handler: the normalize -> validate -> execute -> serialize
pipeline behind every jobs endpoint.
"""

import re
from typing import Any, Dict, Mapping
import structlog

from jobly.domains.job.domain.entities import MAX_INTEGER
from jobly.domains.job.domain.repositories import JobStore
from jobly.shared.application.exceptions import ValidationException
from ..filters import normalize_job_filters
from ..validation import (
    Invalid,
    ValidationResult,
    ensure_valid,
    validate_job_new,
    validate_job_query,
    validate_job_update,
)


logger = structlog.get_logger(__name__)

_ID_RE = re.compile(r"-?[0-9]+")


def parse_job_id(raw_id: Any) -> int:
    """Parse a path segment into a job id, rejecting anything non-numeric."""
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        job_id = raw_id
    elif isinstance(raw_id, str) and _ID_RE.fullmatch(raw_id):
        job_id = int(raw_id)
    else:
        raise ValidationException(["id: must be an integer"])

    if abs(job_id) > MAX_INTEGER:
        raise ValidationException(["id: out of range"])
    return job_id


class JobResourceHandler:
    """Stateless orchestration of job operations against an injected store.

    Every method returns the JSON envelope of a successful response; failures
    are raised as application exceptions for the API error handlers.
    """

    def __init__(self, store: JobStore):
        self.store = store

    def _checked(self, result: ValidationResult, operation: str):
        if isinstance(result, Invalid):
            logger.warning("Job input rejected", operation=operation, errors=result.errors)
        return ensure_valid(result)

    async def create(self, payload: Any) -> Dict[str, Any]:
        """POST /jobs: create a job from a JSON body."""
        job_in = self._checked(validate_job_new(payload), "create")

        job = await self.store.create(job_in.model_dump())

        logger.info("Job created", job_id=job.id, company_handle=job.company_handle)
        return {"job": job.to_dict()}

    async def list(self, params: Mapping[str, str]) -> Dict[str, Any]:
        """GET /jobs: list jobs narrowed by optional filters."""
        query = self._checked(validate_job_query(normalize_job_filters(params)), "list")

        jobs = await self.store.find_all(query.to_filters())
        return {"jobs": [job.to_dict() for job in jobs]}

    async def get(self, raw_id: Any) -> Dict[str, Any]:
        """GET /jobs/{id}: fetch a single job."""
        job = await self.store.find_by_id(parse_job_id(raw_id))
        return {"job": job.to_dict()}

    async def update(self, raw_id: Any, payload: Any) -> Dict[str, Any]:
        """PATCH /jobs/{id}: apply a non-empty partial update."""
        job_id = parse_job_id(raw_id)
        patch = self._checked(validate_job_update(payload), "update").to_patch()

        job = await self.store.update(job_id, patch)

        logger.info("Job updated", job_id=job.id, fields=sorted(patch))
        return {"job": job.to_dict()}

    async def delete(self, raw_id: Any) -> Dict[str, Any]:
        """DELETE /jobs/{id}: remove a job."""
        job_id = parse_job_id(raw_id)

        await self.store.remove(job_id)

        logger.info("Job deleted", job_id=job_id)
        return {"deleted": job_id}
