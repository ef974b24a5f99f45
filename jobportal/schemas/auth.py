"""
Authentication schemas.
"""
from typing import Optional
from pydantic import EmailStr, Field
from jobportal.schemas.base import BaseSchema
from jobportal.schemas.user import UserResponse


class RegisterRequest(BaseSchema):
    """Registration request body."""

    name: str = Field(..., max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: EmailStr
    # byte length is checked by AuthService.register
    password: str = Field(..., max_length=72)


class LoginRequest(BaseSchema):
    """
    Login request body.

    Both fields are optional here so a missing value is reported with the
    same generic credentials error as a wrong one.
    """

    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseSchema):
    """Response after successful registration or login."""

    success: bool = True
    message: str
    user: UserResponse
    token: str
