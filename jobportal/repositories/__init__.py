"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from jobportal.repositories.base import BaseRepository
from jobportal.repositories.user_repository import UserRepository
from jobportal.repositories.job_repository import JobRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "JobRepository",
]
