"""Role and permission catalog API routes."""

from uuid import UUID

from fastapi import Query, status

from hireboard.api.dependencies import DBSession
from hireboard.core.auth.dependencies import CurrentUser
from hireboard.core.permissions import require_permission
from hireboard.modules.roles import router
from hireboard.modules.roles.schemas import (
    PermissionListResponse,
    PermissionResponse,
    RoleCreate,
    RoleListResponse,
    RoleResponse,
    RoleUpdate,
)
from hireboard.modules.roles.services import RoleSvc


@router.get(
    "/roles",
    response_model=RoleListResponse,
    summary="List roles",
    description="System roles first, then by name, each with its user count.",
)
@require_permission("roles", "read")
async def list_roles(
    service: RoleSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
    include_permissions: bool = Query(False, description="Include each role's grants"),
) -> RoleListResponse:
    """List roles."""
    return RoleListResponse(items=await service.list_roles(include_permissions))


@router.post(
    "/roles",
    response_model=RoleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create role",
)
@require_permission("roles", "create")
async def create_role(
    data: RoleCreate,
    service: RoleSvc,
    current_user: CurrentUser,
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> RoleResponse:
    """Create a custom role."""
    return await service.create_role(data, creator_id=current_user.id)


@router.get(
    "/roles/{role_id}",
    response_model=RoleResponse,
    summary="Get role",
)
@require_permission("roles", "read")
async def get_role(
    role_id: UUID,
    service: RoleSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> RoleResponse:
    """Get a role with its grants."""
    return await service.describe_role(role_id)


@router.put(
    "/roles/{role_id}",
    response_model=RoleResponse,
    summary="Update role",
    description="Grants in the request replace the role's existing grants.",
)
@require_permission("roles", "update")
async def update_role(
    role_id: UUID,
    data: RoleUpdate,
    service: RoleSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> RoleResponse:
    """Update a role."""
    return await service.update_role(role_id, data)


@router.delete(
    "/roles/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete role",
)
@require_permission("roles", "delete")
async def delete_role(
    role_id: UUID,
    service: RoleSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> None:
    """Delete a role that no user holds."""
    await service.delete_role(role_id)


@router.get(
    "/permissions",
    response_model=PermissionListResponse,
    summary="List permission catalog",
)
@require_permission("roles", "read")
async def list_permissions(
    service: RoleSvc,
    current_user: CurrentUser,  # noqa: ARG001 - required for permission check
    db: DBSession,  # noqa: ARG001 - required for permission check
) -> PermissionListResponse:
    """List every grantable permission."""
    permissions = await service.list_permissions()
    return PermissionListResponse(
        items=[PermissionResponse.model_validate(p) for p in permissions]
    )
