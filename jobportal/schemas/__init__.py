"""
Pydantic schemas for API validation and serialization.
"""
from jobportal.schemas.base import (
    BaseSchema,
    MessageResponse,
    ErrorResponse,
)
from jobportal.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    AuthResponse,
)
from jobportal.schemas.user import (
    UserUpdate,
    UserResponse,
    UserEnvelope,
    UserUpdateResponse,
)
from jobportal.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobListResponse,
    DefaultStats,
    MonthlyApplication,
    JobStatsResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "AuthResponse",
    # User
    "UserUpdate",
    "UserResponse",
    "UserEnvelope",
    "UserUpdateResponse",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "JobListResponse",
    "DefaultStats",
    "MonthlyApplication",
    "JobStatsResponse",
]
