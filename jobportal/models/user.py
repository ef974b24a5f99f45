"""
User model - a registered job seeker.
"""
from typing import TYPE_CHECKING, Optional, List
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobportal.core.config import settings
from jobportal.models.base import BaseModel

if TYPE_CHECKING:
    from jobportal.models.job import Job


class User(BaseModel):
    """
    User entity.

    The password is only ever stored as a bcrypt hash and no response
    schema exposes ``password_hash``.
    """

    __tablename__ = "users"

    # Authentication
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Profile
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    location: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=lambda: settings.default_user_location,
    )

    # Relationships
    jobs: Mapped[List["Job"]] = relationship(
        "Job",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User {self.email}>"
