"""Job posting database models."""

from enum import StrEnum
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hireboard.core.constants import MAX_NAME_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH
from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin


if TYPE_CHECKING:
    from hireboard.modules.forms.models import Form
    from hireboard.modules.users.models import User


class JobStatus(StrEnum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    CLOSED = "CLOSED"
    DRAFT = "DRAFT"


class Job(Base, UUIDMixin, TimestampMixin):
    """A job posting.

    Only ACTIVE jobs are visible on the public careers page and accept
    applications.

    Attributes:
        title: Posting title
        description: Full description
        position: Level or position name
        status: One of JobStatus
        form_id: Application form candidates fill in
        creator_id: User who created the posting
        assignee_id: Recruiter responsible for the posting
        embed_code: HTML snippet for embedding the posting elsewhere
    """

    __tablename__ = "jobs"

    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    department: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    location: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    experience_level: Mapped[str | None] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=True,
    )
    salary: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        default=JobStatus.ACTIVE.value,
        nullable=False,
        index=True,
    )
    form_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("forms.id", ondelete="SET NULL"),
        nullable=True,
    )
    creator_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    assignee_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    image_url: Mapped[str | None] = mapped_column(String(MAX_URL_LENGTH), nullable=True)
    banner_image_url: Mapped[str | None] = mapped_column(
        String(MAX_URL_LENGTH),
        nullable=True,
    )
    embed_code: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    form: Mapped["Form | None"] = relationship("Form", lazy="selectin")
    creator: Mapped["User | None"] = relationship(
        "User",
        foreign_keys=[creator_id],
        lazy="selectin",
    )
    assignee: Mapped["User | None"] = relationship(
        "User",
        foreign_keys=[assignee_id],
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title={self.title}, status={self.status})>"
