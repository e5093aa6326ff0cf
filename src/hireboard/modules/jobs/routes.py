"""Job posting API routes.

Admin routes require jobs:* permissions; ``/jobs/public`` routes serve the
careers page without authentication.
"""

from uuid import UUID

from fastapi import Query, status

from hireboard.api.dependencies import DBSession, Page, PageSize, page_count
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.constants import DEFAULT_PAGE_SIZE
from hireboard.core.permissions import require_permission
from hireboard.modules.jobs import router
from hireboard.modules.jobs.models import JobStatus
from hireboard.modules.jobs.schemas import (
    JobCreate,
    JobListResponse,
    JobResponse,
    JobUpdate,
    PublicJobDetail,
    PublicJobListResponse,
)
from hireboard.modules.jobs.services import JobSvc, to_public_response


# ============================================================
# Public Routes
# ============================================================


@router.get(
    "/public",
    response_model=PublicJobListResponse,
    summary="List open jobs",
    description="ACTIVE jobs, newest first. No authentication required.",
)
async def list_public_jobs(service: JobSvc) -> PublicJobListResponse:
    """List jobs for the careers page."""
    jobs = await service.list_public_jobs()
    items = [to_public_response(job) for job in jobs]
    return PublicJobListResponse(items=items, total=len(items))


@router.get(
    "/public/{job_id}",
    response_model=PublicJobDetail,
    summary="Get open job",
    description="An ACTIVE job with its application form. No authentication required.",
)
async def get_public_job(job_id: UUID, service: JobSvc) -> PublicJobDetail:
    """Get a job for the apply page."""
    job = await service.get_public_job(job_id)
    return to_public_response(job, with_form=True)


# ============================================================
# Admin Routes
# ============================================================


@router.get("", response_model=JobListResponse, summary="List jobs")
@require_permission("jobs", "read")
async def list_jobs(
    service: JobSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
    page: Page = 1,
    limit: PageSize = DEFAULT_PAGE_SIZE,
    status: JobStatus | None = Query(None, description="Filter by status"),
    search: str | None = Query(None, description="Search title, description, position, location"),
) -> JobListResponse:
    """List jobs with application counts."""
    items, total = await service.list_jobs(page, limit, status, search)
    return JobListResponse(
        items=items,
        total=total,
        page=page,
        limit=limit,
        pages=page_count(total, limit),
    )


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create job",
)
@require_permission("jobs", "create")
async def create_job(
    data: JobCreate,
    service: JobSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> JobResponse:
    """Create a job posting with its embed snippet."""
    return await service.create_job(data, creator_id=current_user.id)


@router.get("/{job_id}", response_model=JobResponse, summary="Get job")
@require_permission("jobs", "read")
async def get_job(
    job_id: UUID,
    service: JobSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> JobResponse:
    """Get a job by ID."""
    return await service.describe_job(job_id)


@router.put("/{job_id}", response_model=JobResponse, summary="Update job")
@require_permission("jobs", "update")
async def update_job(
    job_id: UUID,
    data: JobUpdate,
    service: JobSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> JobResponse:
    """Update a job; reassigning needs jobs:assign, pausing or resuming jobs:pause."""
    return await service.update_job(job_id, data, actor_id=current_user.id)


@router.delete(
    "/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete job",
    description="Deletes the job and all of its applications.",
)
@require_permission("jobs", "delete")
async def delete_job(
    job_id: UUID,
    service: JobSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> None:
    """Delete a job."""
    await service.delete_job(job_id)
