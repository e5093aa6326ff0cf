"""Pydantic schemas for job applications."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hireboard.core.constants import MAX_REMARKS_LENGTH
from hireboard.modules.applications.models import ApplicationStatus


# ============================================================
# Public Submission
# ============================================================


class ApplicationSubmit(BaseModel):
    """A candidate's answers, keyed by form field id."""

    job_id: UUID
    form_data: dict[str, Any]
    field_labels: dict[str, str] | None = None


class ApplicationSubmitResponse(BaseModel):
    id: UUID
    status: ApplicationStatus
    message: str = "Application submitted successfully"


# ============================================================
# Admin Schemas
# ============================================================


class ApplicationSummary(BaseModel):
    """An application row in the admin list."""

    id: UUID
    job_id: UUID
    job_title: str | None = None
    candidate_name: str | None = None
    candidate_email: str | None = None
    status: ApplicationStatus
    is_archived: bool
    archived_at: datetime | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ApplicationDetail(ApplicationSummary):
    candidate_phone: str | None = None
    resume_file_name: str | None = None
    resume_path: str | None = None
    cover_letter: str | None = None
    form_data: dict[str, Any] = Field(default_factory=dict)
    remarks: str | None = None
    archived_by: UUID | None = None
    source_domain: str | None = None
    source_url: str | None = None
    user_agent: str | None = None
    ip_address: str | None = None
    updated_at: datetime


class ApplicationListResponse(BaseModel):
    items: list[ApplicationSummary]
    total: int
    page: int
    limit: int
    pages: int


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
    remarks: str | None = Field(None, max_length=MAX_REMARKS_LENGTH)


class ArchiveRequest(BaseModel):
    is_archived: bool


class BulkArchiveRequest(BaseModel):
    application_ids: list[UUID]
    is_archived: bool


class BulkArchiveResponse(BaseModel):
    updated_count: int
    message: str
