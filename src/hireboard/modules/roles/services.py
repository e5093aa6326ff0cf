"""Role service for business logic."""

from collections import Counter
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from hireboard.core.errors import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from hireboard.core.permissions.evaluator import ADMINISTRATOR_ROLE_NAME
from hireboard.core.permissions.models import Permission, Role, RolePermission
from hireboard.modules.roles.repos import PermissionRepo, RoleRepo
from hireboard.modules.roles.schemas import (
    GrantInput,
    GrantResponse,
    RoleCreate,
    RoleResponse,
    RoleUpdate,
)


logger = structlog.get_logger()


def to_response(role: Role, user_count: int, include_permissions: bool = True) -> RoleResponse:
    """Build the list/detail representation of a role."""
    permissions = None
    if include_permissions:
        permissions = [
            GrantResponse.from_role_permission(rp)
            for rp in sorted(
                role.permissions,
                key=lambda rp: (rp.permission.module, rp.permission.action),
            )
        ]
    return RoleResponse(
        id=role.id,
        name=role.name,
        description=role.description,
        is_system=role.is_system,
        is_active=role.is_active,
        user_count=user_count,
        creator_id=role.creator_id,
        created_at=role.created_at,
        updated_at=role.updated_at,
        permissions=permissions,
    )


class RoleService:
    """Service for role management and grant editing."""

    def __init__(self, repo: RoleRepo, permissions: PermissionRepo) -> None:
        self.repo = repo
        self.permissions = permissions

    async def list_roles(self, include_permissions: bool = False) -> list[RoleResponse]:
        rows = await self.repo.list_with_user_counts()
        return [to_response(role, count, include_permissions) for role, count in rows]

    async def list_permissions(self) -> list[Permission]:
        return await self.permissions.list_all()

    async def get_role(self, role_id: UUID) -> Role:
        """Get a role by ID.

        Raises:
            NotFoundError: If role not found
        """
        role = await self.repo.get_by_id(role_id)
        if not role:
            raise NotFoundError(
                "Role not found",
                resource="role",
                resource_id=str(role_id),
            )
        return role

    async def describe_role(self, role_id: UUID) -> RoleResponse:
        role = await self.get_role(role_id)
        return to_response(role, await self.repo.count_users(role.id))

    async def _ensure_name_free(self, name: str) -> None:
        if await self.repo.get_by_name(name):
            raise ConflictError(
                "A role with this name already exists",
                error_code="role_exists",
                details={"name": name},
            )

    def _ensure_name_allowed(self, name: str, role: Role | None = None) -> None:
        """Only a system role may carry the name that bypasses permission checks.

        Raises:
            BadRequestError: If a new or custom role asks for the name
        """
        if name != ADMINISTRATOR_ROLE_NAME:
            return
        if role is None or not role.is_system:
            raise BadRequestError(
                f"The {ADMINISTRATOR_ROLE_NAME} role name is reserved",
                error_code="reserved_role_name",
                details={"name": name},
            )
        logger.warning("administrator_role_assumed", role_id=str(role.id))

    async def _build_grants(self, grants: list[GrantInput]) -> list[RolePermission]:
        """Validate requested grants and turn them into association rows.

        Raises:
            ValidationError: If a permission appears twice
            BadRequestError: If a permission id is not in the catalog
        """
        counts = Counter(g.permission_id for g in grants)
        duplicates = sorted(str(pid) for pid, n in counts.items() if n > 1)
        if duplicates:
            raise ValidationError(
                "Each permission may appear only once",
                error_code="duplicate_grant",
                details={"permission_ids": duplicates},
            )

        known = await self.permissions.get_many(list(counts))
        unknown = sorted(str(pid) for pid in counts if pid not in known)
        if unknown:
            raise BadRequestError(
                "Unknown permission",
                error_code="invalid_permission",
                details={"permission_ids": unknown},
            )

        return [
            RolePermission(
                permission_id=g.permission_id,
                permission=known[g.permission_id],
                granted=g.granted,
            )
            for g in grants
        ]

    async def create_role(self, data: RoleCreate, creator_id: UUID | None = None) -> RoleResponse:
        """Create a custom (non-system) role.

        Raises:
            BadRequestError: If the name is reserved
            ConflictError: If the name is taken
        """
        self._ensure_name_allowed(data.name)
        await self._ensure_name_free(data.name)
        grants = await self._build_grants(data.permissions)

        role = Role(
            name=data.name,
            description=data.description,
            is_system=False,
            is_active=data.is_active,
            creator_id=creator_id,
            permissions=grants,
        )
        role = await self.repo.create(role)
        logger.info("role_created", role_id=str(role.id), name=role.name)
        return to_response(role, 0)

    async def update_role(self, role_id: UUID, data: RoleUpdate) -> RoleResponse:
        """Update a role; ``data.permissions`` replaces its grants.

        Raises:
            NotFoundError: If role not found
            ConflictError: If the new name is taken
            BadRequestError: If a custom role is renamed to the reserved name
        """
        role = await self.get_role(role_id)

        if data.name != role.name:
            self._ensure_name_allowed(data.name, role)
            await self._ensure_name_free(data.name)
            if role.name == ADMINISTRATOR_ROLE_NAME:
                logger.warning(
                    "administrator_role_renamed",
                    role_id=str(role.id),
                    new_name=data.name,
                )
            role.name = data.name

        role.description = data.description
        if data.is_active is not None:
            role.is_active = data.is_active

        grants = await self._build_grants(data.permissions)
        role.permissions.clear()
        # Flush the removals first so re-added grants don't collide on the key
        await self.repo.session.flush()
        role.permissions.extend(grants)

        role = await self.repo.update(role)
        return to_response(role, await self.repo.count_users(role.id))

    async def delete_role(self, role_id: UUID) -> None:
        """Delete a role.

        Raises:
            NotFoundError: If role not found
            BadRequestError: If it is the Administrator system role or in use
        """
        role = await self.get_role(role_id)

        if role.is_system and role.name == ADMINISTRATOR_ROLE_NAME:
            raise BadRequestError(
                "The Administrator role cannot be deleted",
                error_code="system_role_protected",
            )

        user_count = await self.repo.count_users(role.id)
        if user_count:
            raise BadRequestError(
                "Role is assigned to users",
                error_code="role_in_use",
                details={"user_count": user_count},
            )

        await self.repo.delete(role)
        logger.info("role_deleted", role_id=str(role_id), name=role.name)


# Type alias for dependency injection
RoleSvc = Annotated[RoleService, Depends(RoleService)]
