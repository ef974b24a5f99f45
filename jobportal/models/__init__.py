"""
Database models for the job portal.

All models use UUID primary keys and include created_at/updated_at timestamps.
"""
from jobportal.models.base import BaseModel, TimestampMixin, UUIDMixin
from jobportal.models.job import Job, JobStatus, WorkType
from jobportal.models.user import User

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "UUIDMixin",
    "Job",
    "JobStatus",
    "WorkType",
    "User",
]
