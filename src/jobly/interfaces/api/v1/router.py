"""
API v1 router configuration.
"""

from fastapi import APIRouter

from .job_endpoints import router as job_router


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    router = APIRouter()

    router.include_router(job_router)  # Already has /jobs prefix

    return router
