"""Job application API routes.

``POST /applications`` is the public submission endpoint used by the careers
page and embedded widgets; every other route requires applications:*
permissions.
"""

from datetime import UTC, datetime
from uuid import UUID

from fastapi import Query, Request, status
from fastapi.responses import StreamingResponse

from hireboard.api.dependencies import DBSession, Page, PageSize, page_count
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.constants import (
    DEFAULT_PAGE_SIZE,
    MAX_IPV6_LENGTH,
    MAX_USER_AGENT_LENGTH,
)
from hireboard.core.logging import get_client_ip
from hireboard.core.permissions import require_all_permissions, require_permission
from hireboard.modules.applications import router
from hireboard.modules.applications.intake import resolve_source
from hireboard.modules.applications.models import ApplicationStatus
from hireboard.modules.applications.schemas import (
    ApplicationDetail,
    ApplicationListResponse,
    ApplicationStatusUpdate,
    ApplicationSubmit,
    ApplicationSubmitResponse,
    ApplicationSummary,
    ArchiveRequest,
    BulkArchiveRequest,
    BulkArchiveResponse,
)
from hireboard.modules.applications.services import ApplicationSvc


# ============================================================
# Public Submission
# ============================================================


@router.post(
    "",
    response_model=ApplicationSubmitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit application",
    description="Public endpoint; the job must be ACTIVE.",
)
async def submit_application(
    data: ApplicationSubmit,
    service: ApplicationSvc,
    request: Request,
) -> ApplicationSubmitResponse:
    """Submit an application for a job."""
    source_domain, source_url = resolve_source(
        request.headers.get("Referer"),
        request.headers.get("Origin"),
    )
    user_agent = request.headers.get("User-Agent")
    application = await service.submit(
        data,
        source_domain=source_domain,
        source_url=source_url,
        user_agent=user_agent[:MAX_USER_AGENT_LENGTH] if user_agent else None,
        ip_address=(get_client_ip(request) or "")[:MAX_IPV6_LENGTH] or None,
    )
    return ApplicationSubmitResponse(id=application.id, status=application.status)


# ============================================================
# Review Routes
# ============================================================


@router.get("", response_model=ApplicationListResponse, summary="List applications")
@require_permission("applications", "read")
async def list_applications(
    service: ApplicationSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
    page: Page = 1,
    limit: PageSize = DEFAULT_PAGE_SIZE,
    status: ApplicationStatus | None = Query(None, description="Filter by status"),
    include_archived: bool = Query(False, description="Include archived applications"),
    archived_only: bool = Query(False, description="Only archived applications"),
) -> ApplicationListResponse:
    """List applications, newest first; archived ones are hidden by default."""
    applications, total = await service.list_applications(
        page,
        limit,
        status=status,
        include_archived=include_archived,
        archived_only=archived_only,
    )
    return ApplicationListResponse(
        items=[ApplicationSummary.model_validate(a) for a in applications],
        total=total,
        page=page,
        limit=limit,
        pages=page_count(total, limit),
    )


@router.get(
    "/export",
    response_class=StreamingResponse,
    summary="Export applications as CSV",
    description="Takes the same filters as the list; every matching row is exported.",
)
@require_all_permissions([("applications", "read"), ("applications", "export")])
async def export_applications(
    service: ApplicationSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
    status: ApplicationStatus | None = Query(None, description="Filter by status"),
    include_archived: bool = Query(False, description="Include archived applications"),
    archived_only: bool = Query(False, description="Only archived applications"),
) -> StreamingResponse:
    """Download applications as a CSV attachment."""
    content = await service.export_applications(
        status=status,
        include_archived=include_archived,
        archived_only=archived_only,
    )
    filename = f"applications-{datetime.now(UTC):%Y%m%d}.csv"
    return StreamingResponse(
        iter([content]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.post(
    "/bulk-archive",
    response_model=BulkArchiveResponse,
    summary="Archive or unarchive many applications",
)
@require_permission("applications", "archive")
async def bulk_archive(
    data: BulkArchiveRequest,
    service: ApplicationSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> BulkArchiveResponse:
    """Only applications whose archive state differs are changed."""
    count = await service.set_archived_many(
        data.application_ids,
        data.is_archived,
        actor_id=current_user.id,
    )
    verb = "archived" if data.is_archived else "unarchived"
    return BulkArchiveResponse(
        updated_count=count,
        message=f"{count} application(s) {verb} successfully",
    )


@router.get(
    "/{application_id}",
    response_model=ApplicationDetail,
    summary="Get application",
)
@require_permission("applications", "read")
async def get_application(
    application_id: UUID,
    service: ApplicationSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> ApplicationDetail:
    """Get an application with its answers."""
    application = await service.get_application(application_id)
    return ApplicationDetail.model_validate(application)


@router.patch(
    "/{application_id}/status",
    response_model=ApplicationDetail,
    summary="Update application status",
)
@require_permission("applications", "update")
async def update_status(
    application_id: UUID,
    data: ApplicationStatusUpdate,
    service: ApplicationSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> ApplicationDetail:
    """Set the status and, optionally, remarks."""
    application = await service.update_status(application_id, data.status, data.remarks)
    return ApplicationDetail.model_validate(application)


@router.patch(
    "/{application_id}/archive",
    response_model=ApplicationDetail,
    summary="Archive or unarchive application",
)
@require_permission("applications", "archive")
async def set_archived(
    application_id: UUID,
    data: ArchiveRequest,
    service: ApplicationSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> ApplicationDetail:
    """Archive or unarchive an application."""
    application = await service.set_archived(
        application_id,
        data.is_archived,
        actor_id=current_user.id,
    )
    return ApplicationDetail.model_validate(application)


@router.delete(
    "/{application_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete application",
)
@require_permission("applications", "delete")
async def delete_application(
    application_id: UUID,
    service: ApplicationSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> None:
    """Delete an application."""
    await service.delete_application(application_id)
