"""Pydantic schemas for email templates."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hireboard.core.constants import MAX_EMAIL_SUBJECT_LENGTH, MAX_NAME_LENGTH
from hireboard.modules.email_templates.models import TemplateType


class EmailTemplateBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    type: TemplateType
    subject: str = Field(..., min_length=1, max_length=MAX_EMAIL_SUBJECT_LENGTH)
    body: str = Field(..., min_length=1)
    is_active: bool = True


class EmailTemplateCreate(EmailTemplateBase):
    pass


class EmailTemplateUpdate(EmailTemplateBase):
    """Schema for updating a template; every field is replaced."""


class TemplateStatusUpdate(BaseModel):
    is_active: bool


class EmailTemplateResponse(EmailTemplateBase):
    id: UUID
    variables: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EmailTemplateListResponse(BaseModel):
    items: list[EmailTemplateResponse]


class PreviewRequest(BaseModel):
    """Sample values keyed by placeholder name."""

    values: dict[str, str] = Field(default_factory=dict)


class PreviewResponse(BaseModel):
    subject: str
    body: str
    missing: list[str] = Field(
        default_factory=list,
        description="Placeholders the sample values did not cover",
    )
