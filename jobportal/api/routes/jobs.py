"""
Job routes.

Every route is authenticated and passes the caller's id to JobService
as the owner.
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.database import get_db
from jobportal.api.deps import get_current_user_id
from jobportal.schemas.base import ErrorResponse, MessageResponse
from jobportal.schemas.job import (
    JobCreate,
    JobListResponse,
    JobResponse,
    JobStatsResponse,
    JobUpdate,
)
from jobportal.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()

_OWNED_JOB_ERRORS = {
    403: {"model": ErrorResponse, "description": "Job belongs to another user"},
    404: {"model": ErrorResponse, "description": "Job not found"},
}


@router.post("/create-job", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    body: JobCreate,
    owner_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a job application owned by the caller."""
    return await job_service.create_job(
        db,
        owner_id,
        company=body.company,
        position=body.position,
        work_location=body.work_location,
        work_type=body.work_type,
        status=body.status,
    )


@router.get("/get-job", response_model=JobListResponse)
async def list_jobs(
    job_status: Optional[str] = Query(None, alias="status", description="pending, reject, interview or all"),
    work_type: Optional[str] = Query(None, alias="workType", description="full-time, part-time, internship, contract or all"),
    search: Optional[str] = Query(None, description="Case-insensitive search in position"),
    sort: str = Query("latest", description="latest, oldest, a-z or z-a"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    owner_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    List the caller's jobs with optional filters.
    """
    return await job_service.list_jobs(
        db,
        owner_id,
        status=job_status,
        work_type=work_type,
        search=search,
        sort=sort,
        page=page,
        limit=limit,
    )


@router.patch("/update-job/{job_id}", response_model=JobResponse, responses=_OWNED_JOB_ERRORS)
async def update_job(
    job_id: UUID,
    body: JobUpdate,
    owner_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Update fields of one of the caller's jobs."""
    return await job_service.update_job(
        db,
        owner_id,
        job_id,
        body.model_dump(exclude_unset=True),
    )


@router.delete("/delete-job/{job_id}", response_model=MessageResponse, responses=_OWNED_JOB_ERRORS)
async def delete_job(
    job_id: UUID,
    owner_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete one of the caller's jobs."""
    return await job_service.delete_job(db, owner_id, job_id)


@router.get("/job-stats", response_model=JobStatsResponse)
async def job_stats(
    owner_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Counts of the caller's jobs per status and per month."""
    return await job_service.job_stats(db, owner_id)
