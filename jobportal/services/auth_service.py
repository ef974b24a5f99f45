"""
Authentication service - handles registration, login, and token issuing.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.exceptions import (
    EmailAlreadyExistsException,
    InvalidCredentialsException,
    ValidationException,
)
from jobportal.core.logging import get_logger
from jobportal.core.security import create_access_token, hash_password, verify_password
from jobportal.models.user import User
from jobportal.repositories.user_repository import UserRepository
from jobportal.schemas.auth import AuthResponse
from jobportal.schemas.user import UserResponse

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt ignores everything after the 72nd byte
MAX_PASSWORD_BYTES = 72


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def register(
        self,
        db: AsyncSession,
        *,
        name: str,
        email: str,
        password: str,
        last_name: Optional[str] = None,
    ) -> AuthResponse:
        """
        Register a new user and return a token with the public profile.

        Raises:
            ValidationException: If a required field is blank or the password is too short
                or longer than bcrypt can hash.
            EmailAlreadyExistsException: If email is already registered.
        """
        if not name or not name.strip():
            raise ValidationException("Name is required")
        if not email or not email.strip():
            raise ValidationException("Email is required")
        if not password:
            raise ValidationException("Password is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationException(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

        email = normalize_email(email)
        if await self.user_repo.email_exists(db, email):
            raise EmailAlreadyExistsException()

        try:
            user = await self.user_repo.create(
                db,
                name=name.strip(),
                last_name=last_name.strip() if last_name else None,
                email=email,
                password_hash=hash_password(password),
            )
            await db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            await db.rollback()
            raise EmailAlreadyExistsException()

        logger.info("user_registered", user_id=str(user.id))
        return self._auth_response(user, "User created successfully")

    async def login(
        self,
        db: AsyncSession,
        *,
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResponse:
        """
        Authenticate user and return a fresh token.

        Raises:
            InvalidCredentialsException: For a missing field, unknown email
                or wrong password alike.
        """
        if not email or not password:
            raise InvalidCredentialsException()

        user = await self.user_repo.get_by_email(db, normalize_email(email))

        if not user or not verify_password(password, user.password_hash):
            logger.info("login_failed")
            raise InvalidCredentialsException()

        logger.info("user_logged_in", user_id=str(user.id))
        return self._auth_response(user, "User logged in successfully")

    def _auth_response(self, user: User, message: str) -> AuthResponse:
        return AuthResponse(
            message=message,
            user=UserResponse.model_validate(user),
            token=create_access_token(str(user.id)),
        )
