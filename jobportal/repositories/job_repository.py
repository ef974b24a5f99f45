"""
Job repository - data access for Job entity.

Every query here takes the owner's id; there is no unscoped listing.
"""
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.models.job import Job, JobStatus, WorkType
from jobportal.repositories.base import BaseRepository


SORT_ORDERS = {
    "latest": (Job.created_at.desc(),),
    "oldest": (Job.created_at.asc(),),
    "a-z": (Job.position.asc(),),
    "z-a": (Job.position.desc(),),
}


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job)

    async def find_for_owner(
        self,
        db: AsyncSession,
        owner_id: UUID,
        *,
        status: Optional[JobStatus] = None,
        work_type: Optional[WorkType] = None,
        search: Optional[str] = None,
        sort: str = "latest",
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Job], int]:
        """
        Find the owner's jobs with filters, sorting and pagination.

        Returns:
            Tuple of (jobs on the requested page, total matching count)
        """
        query = select(Job).where(Job.created_by == owner_id)

        if status:
            query = query.where(Job.status == status)

        if work_type:
            query = query.where(Job.work_type == work_type)

        if search:
            query = query.where(Job.position.icontains(search, autoescape=True))

        # Total count
        count_query = select(func.count()).select_from(query.subquery())
        total_result = await db.execute(count_query)
        total = total_result.scalar() or 0

        # Sorting, id last so pages are stable on ties
        query = query.order_by(*SORT_ORDERS[sort], Job.id)

        # Pagination
        query = query.offset((page - 1) * limit).limit(limit)

        result = await db.execute(query)
        jobs = list(result.scalars().all())

        return jobs, total

    async def count_by_status(
        self,
        db: AsyncSession,
        owner_id: UUID,
    ) -> Dict[JobStatus, int]:
        """Count the owner's jobs grouped by status. Absent statuses are omitted."""
        result = await db.execute(
            select(Job.status, func.count(Job.id))
            .where(Job.created_by == owner_id)
            .group_by(Job.status)
        )
        return {status: count for status, count in result.all()}

    async def monthly_counts(
        self,
        db: AsyncSession,
        owner_id: UUID,
        *,
        months: int,
    ) -> List[Tuple[int, int, int]]:
        """
        Count the owner's jobs per creation (year, month).

        Returns the most recent ``months`` buckets, newest first, as
        (year, month, count) tuples.
        """
        year = extract("year", Job.created_at).label("year")
        month = extract("month", Job.created_at).label("month")

        result = await db.execute(
            select(year, month, func.count(Job.id))
            .where(Job.created_by == owner_id)
            .group_by(year, month)
            .order_by(year.desc(), month.desc())
            .limit(months)
        )
        return [(int(y), int(m), count) for y, m, count in result.all()]
