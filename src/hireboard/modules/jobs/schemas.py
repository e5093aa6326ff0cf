"""Pydantic schemas for job postings."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hireboard.core.constants import (
    MAX_NAME_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_URL_LENGTH,
    MIN_JOB_DESCRIPTION_LENGTH,
    MIN_JOB_POSITION_LENGTH,
    MIN_JOB_TITLE_LENGTH,
)
from hireboard.modules.forms.schemas import FormFieldResponse
from hireboard.modules.jobs.models import JobStatus


class JobBase(BaseModel):
    title: str = Field(..., min_length=MIN_JOB_TITLE_LENGTH, max_length=MAX_TITLE_LENGTH)
    description: str = Field(..., min_length=MIN_JOB_DESCRIPTION_LENGTH)
    position: str = Field(..., min_length=MIN_JOB_POSITION_LENGTH, max_length=MAX_NAME_LENGTH)
    department: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    location: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    experience_level: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    salary: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    status: JobStatus = JobStatus.ACTIVE
    form_id: UUID | None = None
    assignee_id: UUID | None = None
    image_url: str | None = Field(None, max_length=MAX_URL_LENGTH)
    banner_image_url: str | None = Field(None, max_length=MAX_URL_LENGTH)


class JobCreate(JobBase):
    pass


class JobUpdate(BaseModel):
    """Schema for updating a job; only fields present in the request apply."""

    title: str | None = Field(None, min_length=MIN_JOB_TITLE_LENGTH, max_length=MAX_TITLE_LENGTH)
    description: str | None = Field(None, min_length=MIN_JOB_DESCRIPTION_LENGTH)
    position: str | None = Field(
        None, min_length=MIN_JOB_POSITION_LENGTH, max_length=MAX_NAME_LENGTH
    )
    department: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    location: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    experience_level: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    salary: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    status: JobStatus | None = None
    form_id: UUID | None = None
    assignee_id: UUID | None = None
    image_url: str | None = Field(None, max_length=MAX_URL_LENGTH)
    banner_image_url: str | None = Field(None, max_length=MAX_URL_LENGTH)


class UserRef(BaseModel):
    id: UUID
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class JobResponse(BaseModel):
    """A job as shown in the admin dashboard."""

    id: UUID
    title: str
    description: str
    position: str
    department: str | None = None
    location: str | None = None
    experience_level: str | None = None
    salary: str | None = None
    status: JobStatus
    form_id: UUID | None = None
    assignee_id: UUID | None = None
    image_url: str | None = None
    banner_image_url: str | None = None
    embed_code: str | None = None
    creator: UserRef | None = None
    assignee: UserRef | None = None
    applications_count: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobListResponse(BaseModel):
    items: list[JobResponse]
    total: int
    page: int
    limit: int
    pages: int


class PublicFormResponse(BaseModel):
    id: UUID
    name: str
    fields: list[FormFieldResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class PublicJobResponse(BaseModel):
    """A job as shown on the careers page."""

    id: UUID
    title: str
    description: str
    position: str
    department: str | None = None
    location: str | None = None
    salary: str | None = None
    experience_level: str | None = None
    status: JobStatus
    created_at: datetime
    form_id: UUID | None = None
    form_name: str | None = None
    image_url: str
    banner_image_url: str | None = None


class PublicJobDetail(PublicJobResponse):
    form: PublicFormResponse | None = None


class PublicJobListResponse(BaseModel):
    items: list[PublicJobResponse]
    total: int
