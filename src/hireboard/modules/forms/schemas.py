"""Pydantic schemas for the form builder."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hireboard.core.constants import (
    DEFAULT_FIELD_WIDTH,
    MAX_CSS_CLASS_LENGTH,
    MAX_FIELD_NAME_LENGTH,
    MAX_NAME_LENGTH,
)
from hireboard.modules.forms.models import FieldType


class FormFieldInput(BaseModel):
    """A field in a form create/update request.

    ``field_name`` is derived from the label; ``order`` is the position in
    the request.
    """

    label: str = Field(..., min_length=1, max_length=MAX_FIELD_NAME_LENGTH)
    field_type: FieldType = FieldType.TEXT
    placeholder: str | None = Field(None, max_length=MAX_FIELD_NAME_LENGTH)
    options: list[str] | None = None
    css_class: str | None = Field(None, max_length=MAX_CSS_CLASS_LENGTH)
    field_id: str | None = Field(None, max_length=MAX_FIELD_NAME_LENGTH)
    field_width: str = DEFAULT_FIELD_WIDTH
    is_required: bool = False


class FormFieldResponse(BaseModel):
    id: UUID
    field_name: str
    field_type: FieldType
    label: str
    placeholder: str | None = None
    options: list[str] | None = None
    css_class: str | None = None
    field_id: str | None = None
    field_width: str
    is_required: bool
    order: int

    model_config = ConfigDict(from_attributes=True)


class FormBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = None
    is_default: bool = False


class FormCreate(FormBase):
    fields: list[FormFieldInput] = Field(default_factory=list)


class FormUpdate(FormBase):
    """Schema for updating a form; ``fields`` replaces the existing fields."""

    fields: list[FormFieldInput] = Field(default_factory=list)


class FormResponse(FormBase):
    id: UUID
    fields: list[FormFieldResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FormListResponse(BaseModel):
    items: list[FormResponse]
