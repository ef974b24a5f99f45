"""
Job schemas.
"""
from typing import List, Optional
from uuid import UUID
from pydantic import Field

from jobportal.models.job import JobStatus, WorkType
from jobportal.schemas.base import BaseSchema, TimestampSchema, IDSchema


class JobCreate(BaseSchema):
    """Create job request body. The owner always comes from the token."""

    company: str = Field(..., max_length=255)
    position: str = Field(..., max_length=255)
    work_location: str = Field(..., max_length=255)
    work_type: WorkType = WorkType.FULL_TIME
    status: JobStatus = JobStatus.PENDING


class JobUpdate(BaseSchema):
    """Partial job update. Only fields present in the body are applied."""

    company: Optional[str] = Field(None, max_length=255)
    position: Optional[str] = Field(None, max_length=255)
    work_location: Optional[str] = Field(None, max_length=255)
    work_type: Optional[WorkType] = None
    status: Optional[JobStatus] = None


class JobResponse(IDSchema, TimestampSchema):
    """Job response."""

    company: str
    position: str
    status: JobStatus
    work_type: WorkType
    work_location: str
    created_by: UUID


class JobListResponse(BaseSchema):
    """One page of the caller's jobs."""

    total_jobs: int
    jobs: List[JobResponse]
    num_of_page: int


class DefaultStats(BaseSchema):
    """Job counts per status."""

    pending: int = 0
    reject: int = 0
    interview: int = 0


class MonthlyApplication(BaseSchema):
    """Applications created in one calendar month, e.g. ``Oct 2026``."""

    date: str
    count: int


class JobStatsResponse(BaseSchema):
    """Aggregate statistics over the caller's jobs."""

    total_jobs: int
    default_stats: DefaultStats
    monthly_applications: List[MonthlyApplication]
