"""
Service layer - business logic and orchestration.

Services contain the application's business logic and coordinate
repositories.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from jobportal.services.auth_service import AuthService
from jobportal.services.job_service import JobService
from jobportal.services.user_service import UserService

__all__ = [
    "AuthService",
    "JobService",
    "UserService",
]
