"""
Job model - a job application tracked by its owner.
"""
import enum
import uuid
from typing import TYPE_CHECKING
from sqlalchemy import Enum, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobportal.models.base import BaseModel

if TYPE_CHECKING:
    from jobportal.models.user import User


class JobStatus(str, enum.Enum):
    PENDING = "pending"
    REJECT = "reject"
    INTERVIEW = "interview"


class WorkType(str, enum.Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    INTERNSHIP = "internship"
    CONTRACT = "contract"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Job(BaseModel):
    """
    Job posting entity.

    ``created_by`` is set once from the authenticated user and never
    changes; every read and write is filtered on it.
    """

    __tablename__ = "jobs"

    # Owner
    created_by: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Core fields
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    work_location: Mapped[str] = mapped_column(String(255), nullable=False)

    status: Mapped[JobStatus] = mapped_column(
        Enum(JobStatus, name="job_status", native_enum=False, length=20, values_callable=_enum_values),
        nullable=False,
        default=JobStatus.PENDING,
        index=True,
    )
    work_type: Mapped[WorkType] = mapped_column(
        Enum(WorkType, name="work_type", native_enum=False, length=20, values_callable=_enum_values),
        nullable=False,
        default=WorkType.FULL_TIME,
    )

    # Relationships
    owner: Mapped["User"] = relationship("User", back_populates="jobs")

    def __repr__(self) -> str:
        return f"<Job {self.position} at {self.company}>"
