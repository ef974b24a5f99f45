"""
User schemas.
"""
from typing import Optional
from pydantic import Field
from jobportal.schemas.base import BaseSchema, TimestampSchema, IDSchema


class UserResponse(IDSchema, TimestampSchema):
    """Public user projection. Never carries the password."""

    name: str
    last_name: Optional[str] = None
    email: str
    location: str


class UserUpdate(BaseSchema):
    """Mutable profile fields. Email and password are not changed here."""

    name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=255)


class UserEnvelope(BaseSchema):
    """Single user response."""

    success: bool = True
    user: UserResponse


class UserUpdateResponse(UserEnvelope):
    """Profile update response."""

    message: str = "Profile updated successfully"
