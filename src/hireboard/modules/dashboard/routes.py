"""Dashboard API routes."""

from hireboard.api.dependencies import DBSession
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.permissions import require_permission
from hireboard.modules.dashboard import router
from hireboard.modules.dashboard.schemas import ActivityResponse
from hireboard.modules.dashboard.services import DashboardSvc


@router.get(
    "/activity",
    response_model=ActivityResponse,
    summary="Recent activity",
    description="New applications, job postings and users, newest first.",
)
@require_permission("dashboard", "read")
async def recent_activity(
    service: DashboardSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> ActivityResponse:
    return ActivityResponse(activities=await service.recent_activity())
