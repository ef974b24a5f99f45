"""
Job service - business logic for the caller's job applications:
create, list, update, delete and statistics.

Every method takes the owner's id from the auth guard as its first
argument after the session; jobs owned by anyone else are never read
or written.
"""
from datetime import date
from typing import Any, Dict, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.config import settings
from jobportal.core.exceptions import (
    JobNotFoundException,
    NotJobOwnerException,
    ValidationException,
)
from jobportal.core.logging import get_logger
from jobportal.models.job import Job, JobStatus, WorkType
from jobportal.repositories.job_repository import SORT_ORDERS, JobRepository
from jobportal.schemas.base import MessageResponse
from jobportal.schemas.job import (
    DefaultStats,
    JobListResponse,
    JobResponse,
    JobStatsResponse,
    MonthlyApplication,
)

logger = get_logger(__name__)

E = TypeVar("E", JobStatus, WorkType)

REQUIRED_FIELDS = ("company", "position", "work_location")


def _parse_choice(enum_cls: Type[E], value: Optional[str], field: str) -> Optional[E]:
    """Parse a filter value. Empty or ``all`` means no filter."""
    if not value or value == "all":
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationException(f"Invalid {field} '{value}', expected one of: {allowed}, all")


def _require_text(field: str, value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ValidationException(f"{field} is required")
    return value.strip()


class JobService:
    """Handles job CRUD and aggregation scoped to one owner."""

    def __init__(self):
        self.job_repo = JobRepository()

    async def create_job(
        self,
        db: AsyncSession,
        owner_id: UUID,
        *,
        company: str,
        position: str,
        work_location: str,
        work_type: WorkType = WorkType.FULL_TIME,
        status: JobStatus = JobStatus.PENDING,
    ) -> JobResponse:
        """
        Create a job owned by ``owner_id``.

        Raises:
            ValidationException: If company, position or work location is blank.
        """
        job = await self.job_repo.create(
            db,
            company=_require_text("company", company),
            position=_require_text("position", position),
            work_location=_require_text("work_location", work_location),
            work_type=work_type,
            status=status,
            created_by=owner_id,
        )
        await db.commit()

        logger.info("job_created", job_id=str(job.id), owner_id=str(owner_id))
        return JobResponse.model_validate(job)

    async def list_jobs(
        self,
        db: AsyncSession,
        owner_id: UUID,
        *,
        status: Optional[str] = None,
        work_type: Optional[str] = None,
        search: Optional[str] = None,
        sort: str = "latest",
        page: int = 1,
        limit: int = 10,
    ) -> JobListResponse:
        """Get one page of the owner's jobs with filters."""
        if sort not in SORT_ORDERS:
            raise ValidationException(
                f"Invalid sort '{sort}', expected one of: {', '.join(SORT_ORDERS)}"
            )
        if page < 1 or limit < 1:
            raise ValidationException("page and limit must be positive")

        jobs, total = await self.job_repo.find_for_owner(
            db,
            owner_id,
            status=_parse_choice(JobStatus, status, "status"),
            work_type=_parse_choice(WorkType, work_type, "workType"),
            search=search.strip() if search else None,
            sort=sort,
            page=page,
            limit=limit,
        )

        return JobListResponse(
            total_jobs=total,
            jobs=[JobResponse.model_validate(job) for job in jobs],
            num_of_page=(total + limit - 1) // limit,
        )

    async def update_job(
        self,
        db: AsyncSession,
        owner_id: UUID,
        job_id: UUID,
        patch: Dict[str, Any],
    ) -> JobResponse:
        """
        Apply the fields present in ``patch`` to one of the owner's jobs.

        Raises:
            JobNotFoundException: If no job has this id.
            NotJobOwnerException: If the job belongs to someone else.
            ValidationException: If a required text field is blanked.
        """
        job = await self._get_owned_job(db, owner_id, job_id)

        updates = {}
        for field, value in patch.items():
            if field in REQUIRED_FIELDS:
                updates[field] = _require_text(field, value)
            elif field in ("status", "work_type"):
                if value is None:
                    raise ValidationException(f"{field} cannot be null")
                updates[field] = value
        # created_by and ids are never patchable

        if updates:
            job = await self.job_repo.update(db, job, **updates)
            await db.commit()
            logger.info("job_updated", job_id=str(job.id), fields=sorted(updates))

        return JobResponse.model_validate(job)

    async def delete_job(
        self,
        db: AsyncSession,
        owner_id: UUID,
        job_id: UUID,
    ) -> MessageResponse:
        """
        Delete one of the owner's jobs.

        Raises:
            JobNotFoundException: If no job has this id.
            NotJobOwnerException: If the job belongs to someone else.
        """
        job = await self._get_owned_job(db, owner_id, job_id)

        await self.job_repo.delete(db, job.id)
        await db.commit()

        logger.info("job_deleted", job_id=str(job_id), owner_id=str(owner_id))
        return MessageResponse(message="Success, job deleted")

    async def job_stats(
        self,
        db: AsyncSession,
        owner_id: UUID,
    ) -> JobStatsResponse:
        """
        Aggregate the owner's jobs by status and by creation month.

        Monthly buckets cover the most recent ``settings.stats_months``
        months that have any jobs and are returned oldest first.
        """
        by_status = await self.job_repo.count_by_status(db, owner_id)
        default_stats = DefaultStats(
            pending=by_status.get(JobStatus.PENDING, 0),
            reject=by_status.get(JobStatus.REJECT, 0),
            interview=by_status.get(JobStatus.INTERVIEW, 0),
        )

        buckets = await self.job_repo.monthly_counts(
            db, owner_id, months=settings.stats_months
        )
        monthly = [
            MonthlyApplication(
                date=date(year, month, 1).strftime("%b %Y"),
                count=count,
            )
            for year, month, count in reversed(buckets)
        ]

        return JobStatsResponse(
            total_jobs=sum(by_status.values()),
            default_stats=default_stats,
            monthly_applications=monthly,
        )

    async def _get_owned_job(
        self,
        db: AsyncSession,
        owner_id: UUID,
        job_id: UUID,
    ) -> Job:
        job = await self.job_repo.get_by_id(db, job_id)
        if not job:
            raise JobNotFoundException(job_id)
        if job.created_by != owner_id:
            logger.warning(
                "job_ownership_denied", job_id=str(job_id), caller_id=str(owner_id)
            )
            raise NotJobOwnerException()
        return job
