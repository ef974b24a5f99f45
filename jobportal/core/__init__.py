"""Core module exports."""
from jobportal.core.config import settings, get_settings
from jobportal.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from jobportal.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    decode_token,
    verify_token_type,
)
from jobportal.core.exceptions import (
    APIException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    InvalidCredentialsException,
    TokenExpiredException,
    InvalidTokenException,
    UserNotFoundException,
    JobNotFoundException,
    NotJobOwnerException,
    EmailAlreadyExistsException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_token",
    "verify_token_type",
    # Exceptions
    "APIException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "InvalidCredentialsException",
    "TokenExpiredException",
    "InvalidTokenException",
    "UserNotFoundException",
    "JobNotFoundException",
    "NotJobOwnerException",
    "EmailAlreadyExistsException",
]
