"""
Tests for JobService called directly - statistics and ownership rules.
"""
import uuid
from datetime import datetime, timezone

import pytest

from jobportal.core.exceptions import (
    JobNotFoundException,
    NotJobOwnerException,
    ValidationException,
)
from jobportal.models.job import JobStatus, WorkType
from jobportal.repositories.job_repository import JobRepository
from jobportal.repositories.user_repository import UserRepository
from jobportal.services.job_service import JobService


@pytest.fixture
def service() -> JobService:
    return JobService()


async def make_user(db, email: str):
    user = await UserRepository().create(
        db,
        name="Test",
        email=email,
        password_hash="not-a-real-hash",
    )
    await db.commit()
    return user


@pytest.fixture
async def owner(db_session):
    return await make_user(db_session, "owner@example.com")


@pytest.fixture
async def stranger(db_session):
    return await make_user(db_session, "stranger@example.com")


async def add_job(db, owner_id, *, status=JobStatus.PENDING, created_at=None, position="Engineer"):
    fields = dict(
        company="Acme",
        position=position,
        work_location="Remote",
        work_type=WorkType.FULL_TIME,
        status=status,
        created_by=owner_id,
    )
    if created_at:
        fields["created_at"] = created_at
    job = await JobRepository().create(db, **fields)
    await db.commit()
    return job


class TestJobStats:
    """Test JobService.job_stats."""

    async def test_status_counts_default_missing_to_zero(self, service, db_session, owner):
        await add_job(db_session, owner.id, status=JobStatus.PENDING)
        await add_job(db_session, owner.id, status=JobStatus.PENDING)
        await add_job(db_session, owner.id, status=JobStatus.REJECT)

        stats = await service.job_stats(db_session, owner.id)

        assert stats.total_jobs == 3
        assert stats.default_stats.pending == 2
        assert stats.default_stats.reject == 1
        assert stats.default_stats.interview == 0

    async def test_empty_user(self, service, db_session, owner):
        stats = await service.job_stats(db_session, owner.id)

        assert stats.total_jobs == 0
        assert stats.default_stats.model_dump() == {"pending": 0, "reject": 0, "interview": 0}
        assert stats.monthly_applications == []

    async def test_scoped_to_owner(self, service, db_session, owner, stranger):
        await add_job(db_session, owner.id)
        await add_job(db_session, stranger.id)
        await add_job(db_session, stranger.id)

        stats = await service.job_stats(db_session, owner.id)

        assert stats.total_jobs == 1

    async def test_monthly_applications_chronological(self, service, db_session, owner):
        await add_job(db_session, owner.id, created_at=datetime(2026, 3, 10, tzinfo=timezone.utc))
        await add_job(db_session, owner.id, created_at=datetime(2026, 1, 5, tzinfo=timezone.utc))
        await add_job(db_session, owner.id, created_at=datetime(2026, 3, 20, tzinfo=timezone.utc))
        await add_job(db_session, owner.id, created_at=datetime(2025, 12, 31, tzinfo=timezone.utc))

        stats = await service.job_stats(db_session, owner.id)

        assert [(m.date, m.count) for m in stats.monthly_applications] == [
            ("Dec 2025", 1),
            ("Jan 2026", 1),
            ("Mar 2026", 2),
        ]

    async def test_monthly_window_keeps_most_recent_months(self, service, db_session, owner):
        for month in range(1, 10):
            await add_job(db_session, owner.id, created_at=datetime(2026, month, 15, tzinfo=timezone.utc))

        stats = await service.job_stats(db_session, owner.id)

        dates = [m.date for m in stats.monthly_applications]
        assert len(dates) == 6
        assert dates[0] == "Apr 2026"
        assert dates[-1] == "Sep 2026"
        assert stats.total_jobs == 9


class TestOwnership:
    """Test update/delete existence and ownership checks."""

    async def test_update_by_stranger(self, service, db_session, owner, stranger):
        job = await add_job(db_session, owner.id, position="Original")

        with pytest.raises(NotJobOwnerException):
            await service.update_job(db_session, stranger.id, job.id, {"position": "Changed"})

        refreshed = await JobRepository().get_by_id(db_session, job.id)
        assert refreshed.position == "Original"

    async def test_delete_by_stranger(self, service, db_session, owner, stranger):
        job = await add_job(db_session, owner.id)

        with pytest.raises(NotJobOwnerException):
            await service.delete_job(db_session, stranger.id, job.id)

        assert await JobRepository().get_by_id(db_session, job.id) is not None

    async def test_missing_job(self, service, db_session, owner):
        with pytest.raises(JobNotFoundException):
            await service.delete_job(db_session, owner.id, uuid.uuid4())

    async def test_null_status_rejected(self, service, db_session, owner):
        job = await add_job(db_session, owner.id)

        with pytest.raises(ValidationException):
            await service.update_job(db_session, owner.id, job.id, {"status": None})


class TestListJobs:
    """Test JobService.list_jobs paging arithmetic."""

    async def test_twenty_five_jobs_make_three_pages(self, service, db_session, owner):
        for i in range(25):
            await add_job(db_session, owner.id, position=f"Role {i:02d}")

        page = await service.list_jobs(db_session, owner.id, page=3, limit=10, sort="a-z")

        assert page.total_jobs == 25
        assert page.num_of_page == 3
        assert len(page.jobs) == 5

    async def test_unknown_work_type(self, service, db_session, owner):
        with pytest.raises(ValidationException):
            await service.list_jobs(db_session, owner.id, work_type="freelance")
