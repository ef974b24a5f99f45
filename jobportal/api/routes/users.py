"""
User routes.

Thin controllers - all business logic lives in UserService.
"""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.database import get_db
from jobportal.api.deps import get_current_user_id
from jobportal.services.user_service import UserService
from jobportal.schemas.user import UserEnvelope, UserUpdate, UserUpdateResponse

router = APIRouter(prefix="/user", tags=["users"])

user_service = UserService()


@router.get("/me", response_model=UserEnvelope)
async def get_current_user_profile(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get current user's profile."""
    user = await user_service.get_profile(db, user_id)
    return UserEnvelope(user=user)


@router.put("/update-user", response_model=UserUpdateResponse)
async def update_current_user(
    body: UserUpdate,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Update current user's name, last name and location."""
    user = await user_service.update_profile(
        db,
        user_id,
        name=body.name,
        last_name=body.last_name,
        location=body.location,
    )
    return UserUpdateResponse(user=user)
