"""Email template database model."""

from enum import StrEnum

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hireboard.core.constants import MAX_EMAIL_SUBJECT_LENGTH, MAX_NAME_LENGTH
from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin


class TemplateType(StrEnum):
    APPLICATION_STATUS = "APPLICATION_STATUS"
    APPLICATION_RECEIVED = "APPLICATION_RECEIVED"
    ADMIN_NOTIFICATION = "ADMIN_NOTIFICATION"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
    WELCOME = "WELCOME"


class EmailTemplate(Base, UUIDMixin, TimestampMixin):
    """A notification email with ``{{placeholder}}`` variables.

    Attributes:
        name: Unique display name
        type: Which notification the template is used for
        subject: Subject line, may contain placeholders
        body: HTML body, may contain placeholders and ``{{#if x}}`` blocks
        variables: Placeholder names found in the subject and body
        is_active: Inactive templates are never sent
    """

    __tablename__ = "email_templates"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, unique=True)
    type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    subject: Mapped[str] = mapped_column(String(MAX_EMAIL_SUBJECT_LENGTH), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    variables: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<EmailTemplate(id={self.id}, name={self.name}, type={self.type})>"
