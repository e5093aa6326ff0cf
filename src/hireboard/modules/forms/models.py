"""Application form database models."""

from enum import StrEnum
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hireboard.core.constants import (
    DEFAULT_FIELD_WIDTH,
    MAX_CSS_CLASS_LENGTH,
    MAX_FIELD_NAME_LENGTH,
    MAX_NAME_LENGTH,
)
from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin


class FieldType(StrEnum):
    TEXT = "TEXT"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    TEXTAREA = "TEXTAREA"
    SELECT = "SELECT"
    RADIO = "RADIO"
    CHECKBOX = "CHECKBOX"
    FILE = "FILE"
    DATE = "DATE"
    NUMBER = "NUMBER"


class Form(Base, UUIDMixin, TimestampMixin):
    """A reusable application form attached to job postings.

    Attributes:
        name: Display name in the form builder
        description: Optional description
        is_default: At most one form is the default for new jobs
    """

    __tablename__ = "forms"

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    fields: Mapped[list["FormField"]] = relationship(
        "FormField",
        back_populates="form",
        cascade="all, delete-orphan",
        order_by="FormField.order",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Form(id={self.id}, name={self.name}, is_default={self.is_default})>"


class FormField(Base, UUIDMixin, TimestampMixin):
    """One input on a form, in display order."""

    __tablename__ = "form_fields"

    form_id: Mapped[UUID] = mapped_column(
        ForeignKey("forms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    field_name: Mapped[str] = mapped_column(String(MAX_FIELD_NAME_LENGTH), nullable=False)
    field_type: Mapped[str] = mapped_column(String(20), nullable=False)
    label: Mapped[str] = mapped_column(String(MAX_FIELD_NAME_LENGTH), nullable=False)
    placeholder: Mapped[str | None] = mapped_column(String(MAX_FIELD_NAME_LENGTH), nullable=True)
    options: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    css_class: Mapped[str | None] = mapped_column(String(MAX_CSS_CLASS_LENGTH), nullable=True)
    field_id: Mapped[str | None] = mapped_column(String(MAX_FIELD_NAME_LENGTH), nullable=True)
    field_width: Mapped[str] = mapped_column(
        String(20),
        default=DEFAULT_FIELD_WIDTH,
        nullable=False,
    )
    is_required: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    form: Mapped["Form"] = relationship("Form", back_populates="fields")

    def __repr__(self) -> str:
        return f"<FormField(form_id={self.form_id}, field_name={self.field_name})>"
