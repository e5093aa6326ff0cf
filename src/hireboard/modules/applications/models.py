"""Job application database models."""

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hireboard.core.constants import (
    MAX_EMAIL_LENGTH,
    MAX_FILE_NAME_LENGTH,
    MAX_IPV6_LENGTH,
    MAX_NAME_LENGTH,
    MAX_URL_LENGTH,
    MAX_USER_AGENT_LENGTH,
)
from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin


if TYPE_CHECKING:
    from hireboard.modules.jobs.models import Job


class ApplicationStatus(StrEnum):
    PENDING = "PENDING"
    UNDER_REVIEW = "UNDER_REVIEW"
    SHORTLISTED = "SHORTLISTED"
    SELECTED = "SELECTED"
    REJECTED = "REJECTED"


class Application(Base, UUIDMixin, TimestampMixin):
    """A candidate's submission against a job.

    Attributes:
        form_data: Submitted answers keyed by field label
        status: One of ApplicationStatus
        is_archived: Archived applications are hidden from the default list
        archived_by: User who archived the application
        source_domain: Host of the page the application came from
        source_url: Full URL of that page
    """

    __tablename__ = "applications"

    job_id: Mapped[UUID] = mapped_column(
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    candidate_name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    candidate_email: Mapped[str | None] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=True,
        index=True,
    )
    candidate_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    resume_file_name: Mapped[str | None] = mapped_column(
        String(MAX_FILE_NAME_LENGTH),
        nullable=True,
    )
    resume_path: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    cover_letter: Mapped[str | None] = mapped_column(Text, nullable=True)
    form_data: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        default=ApplicationStatus.PENDING.value,
        nullable=False,
        index=True,
    )
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_archived: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        index=True,
    )
    archived_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    archived_by: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    source_domain: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    source_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(
        String(MAX_USER_AGENT_LENGTH),
        nullable=True,
    )
    ip_address: Mapped[str | None] = mapped_column(String(MAX_IPV6_LENGTH), nullable=True)

    job: Mapped["Job"] = relationship("Job", lazy="selectin")

    @property
    def job_title(self) -> str | None:
        return self.job.title if self.job else None

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, job_id={self.job_id}, status={self.status})>"
