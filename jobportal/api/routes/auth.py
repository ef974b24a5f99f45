"""
Authentication routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.database import get_db
from jobportal.core.rate_limit import RATE_AUTH, limiter
from jobportal.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from jobportal.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user.

    Returns the public profile and a one-day access token.
    """
    return await auth_service.register(
        db,
        name=body.name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
    )


@router.post("/login", response_model=AuthResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    db: AsyncSession = Depends(get_db),
    body: Optional[LoginRequest] = None,
):
    """Login with email and password. A missing body counts as missing credentials."""
    body = body or LoginRequest()
    return await auth_service.login(db, email=body.email, password=body.password)
