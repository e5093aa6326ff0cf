"""User management API routes.

Authentication routes (login, current profile) live in the auth package;
this module manages other portal accounts.
"""

from uuid import UUID

from fastapi import Query, status

from hireboard.api.dependencies import DBSession, Page, PageSize
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.constants import DEFAULT_PAGE_SIZE
from hireboard.core.permissions import require_permission
from hireboard.modules.users import router
from hireboard.modules.users.schemas import (
    UserCreate,
    UserListResponse,
    UserResponse,
    UserStatusUpdate,
    UserUpdate,
)
from hireboard.modules.users.services import UserSvc


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
    description="List portal users, newest first. Requires users:read.",
)
@require_permission("users", "read")
async def list_users(
    service: UserSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
    page: Page = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    search: str | None = Query(None, description="Filter by name or email"),
) -> UserListResponse:
    """List users."""
    users, total = await service.list_users(page, page_size, search)
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in users],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a portal user. Requires users:create.",
)
@require_permission("users", "create")
async def create_user(
    data: UserCreate,
    service: UserSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> UserResponse:
    """Create a user."""
    user = await service.create_user(data, creator_id=current_user.id)
    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
    description="Requires users:read.",
)
@require_permission("users", "read")
async def get_user(
    user_id: UUID,
    service: UserSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> UserResponse:
    """Get user by ID."""
    user = await service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Update name, email or role. Changing the role also requires roles:assign.",
)
@require_permission("users", "update")
async def update_user(
    user_id: UUID,
    data: UserUpdate,
    service: UserSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> UserResponse:
    """Update user by ID."""
    user = await service.update_user(user_id, data, actor_id=current_user.id)
    return UserResponse.model_validate(user)


@router.patch(
    "/{user_id}/status",
    response_model=UserResponse,
    summary="Activate or deactivate user",
    description="Requires users:activate. Users cannot deactivate themselves.",
)
@require_permission("users", "activate")
async def set_user_status(
    user_id: UUID,
    data: UserStatusUpdate,
    service: UserSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> UserResponse:
    """Set a user's active flag."""
    user = await service.set_status(user_id, data.is_active, actor_id=current_user.id)
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    description="Requires users:delete. Users cannot delete themselves.",
)
@require_permission("users", "delete")
async def delete_user(
    user_id: UUID,
    service: UserSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> None:
    """Delete a user."""
    await service.delete_user(user_id, actor_id=current_user.id)
