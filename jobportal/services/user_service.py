"""
User service - business logic for the caller's own profile.

Routes never touch the database directly - they call methods here.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.exceptions import UserNotFoundException, ValidationException
from jobportal.core.logging import get_logger
from jobportal.models.user import User
from jobportal.repositories.user_repository import UserRepository
from jobportal.schemas.user import UserResponse

logger = get_logger(__name__)


class UserService:
    """Handles user profile operations."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def get_profile(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> UserResponse:
        """
        Get the caller's public profile.

        Raises:
            UserNotFoundException: If the user no longer exists.
        """
        user = await self._get_user(db, user_id)
        return UserResponse.model_validate(user)

    async def update_profile(
        self,
        db: AsyncSession,
        user_id: UUID,
        *,
        name: Optional[str] = None,
        last_name: Optional[str] = None,
        location: Optional[str] = None,
    ) -> UserResponse:
        """
        Update the caller's name, last name and location.
        Fields left as None are unchanged.

        Raises:
            UserNotFoundException: If the user no longer exists.
            ValidationException: If name or location is blank.
        """
        user = await self._get_user(db, user_id)

        updates = {}
        if name is not None:
            if not name.strip():
                raise ValidationException("Name cannot be empty")
            updates["name"] = name.strip()
        if last_name is not None:
            updates["last_name"] = last_name.strip() or None
        if location is not None:
            if not location.strip():
                raise ValidationException("Location cannot be empty")
            updates["location"] = location.strip()

        if updates:
            user = await self.user_repo.update(db, user, **updates)
            await db.commit()
            logger.info("profile_updated", user_id=str(user_id), fields=sorted(updates))

        return UserResponse.model_validate(user)

    async def _get_user(self, db: AsyncSession, user_id: UUID) -> User:
        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise UserNotFoundException()
        return user
