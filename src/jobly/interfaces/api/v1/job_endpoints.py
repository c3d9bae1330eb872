"""
Jobs API endpoints.

Create, update and delete require an admin caller; listing and fetching
are public.
"""

import json
from typing import Any, Dict
from fastapi import APIRouter, Depends, Request, status

from jobly.domains.job.application.services import JobResourceHandler
from jobly.shared.application.exceptions import ValidationException
from jobly.shared.infrastructure.container import get_job_handler
from jobly.shared.infrastructure.security import ensure_admin


router = APIRouter(prefix="/jobs", tags=["Jobs"])


async def read_json_body(request: Request) -> Any:
    """Decode the request body; an empty body decodes to None."""
    body = await request.body()
    if not body:
        return None

    try:
        return json.loads(body)
    except ValueError:
        raise ValidationException(["body: Invalid JSON"])


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(ensure_admin)])
async def create_job(
    request: Request,
    handler: JobResourceHandler = Depends(get_job_handler),
) -> Dict[str, Any]:
    """POST / { job } => { job }

    job should be { title, salary, equity, companyHandle }
    """
    payload = await read_json_body(request)
    return await handler.create(payload)


@router.get("")
async def list_jobs(
    request: Request,
    handler: JobResourceHandler = Depends(get_job_handler),
) -> Dict[str, Any]:
    """GET / => { jobs: [ { id, title, salary, equity, companyHandle }, ... ] }

    Optional filters: minSalary, hasEquity (only "true" filters),
    nameLike (case-insensitive partial title match).
    """
    return await handler.list(request.query_params)


@router.get("/{job_id}")
async def get_job(
    job_id: str,
    handler: JobResourceHandler = Depends(get_job_handler),
) -> Dict[str, Any]:
    """GET /[id] => { job }"""
    return await handler.get(job_id)


@router.patch("/{job_id}", dependencies=[Depends(ensure_admin)])
async def update_job(
    job_id: str,
    request: Request,
    handler: JobResourceHandler = Depends(get_job_handler),
) -> Dict[str, Any]:
    """PATCH /[id] { field1, field2, ... } => { job }

    Fields can be: { title, salary, equity, companyHandle }
    """
    payload = await read_json_body(request)
    return await handler.update(job_id, payload)


@router.delete("/{job_id}", dependencies=[Depends(ensure_admin)])
async def delete_job(
    job_id: str,
    handler: JobResourceHandler = Depends(get_job_handler),
) -> Dict[str, Any]:
    """DELETE /[id] => { deleted: id }"""
    return await handler.delete(job_id)
