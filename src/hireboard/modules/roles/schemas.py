"""Pydantic schemas for roles and the permission catalog."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hireboard.core.constants import MAX_DESCRIPTION_LENGTH, MAX_ROLE_NAME_LENGTH
from hireboard.core.permissions.models import Role, RolePermission


# ============================================================
# Permission Schemas
# ============================================================


class PermissionResponse(BaseModel):
    """A catalog entry."""

    id: UUID
    module: str
    action: str
    name: str
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class PermissionListResponse(BaseModel):
    items: list[PermissionResponse]


class GrantResponse(PermissionResponse):
    """A catalog entry as granted (or revoked) on a role."""

    granted: bool

    @classmethod
    def from_role_permission(cls, rp: RolePermission) -> "GrantResponse":
        permission = rp.permission
        return cls(
            id=permission.id,
            module=permission.module,
            action=permission.action,
            name=permission.name,
            description=permission.description,
            granted=rp.granted,
        )


# ============================================================
# Role Schemas
# ============================================================


class GrantInput(BaseModel):
    """One grant in a role create/update request."""

    permission_id: UUID
    granted: bool = True


class RoleBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_ROLE_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)


class RoleCreate(RoleBase):
    """Schema for creating a custom role."""

    is_active: bool = True
    permissions: list[GrantInput] = Field(default_factory=list)


class RoleUpdate(RoleBase):
    """Schema for updating a role.

    ``permissions`` replaces the role's grants wholesale.
    """

    is_active: bool | None = None
    permissions: list[GrantInput] = Field(default_factory=list)


class RoleSummary(BaseModel):
    """A role without its grants."""

    id: UUID
    name: str
    description: str | None = None
    is_system: bool
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class RoleDetail(RoleSummary):
    """A role with its grants."""

    permissions: list[GrantResponse] = Field(default_factory=list)

    @classmethod
    def from_role(cls, role: Role) -> "RoleDetail":
        return cls(
            id=role.id,
            name=role.name,
            description=role.description,
            is_system=role.is_system,
            is_active=role.is_active,
            permissions=[
                GrantResponse.from_role_permission(rp)
                for rp in sorted(
                    role.permissions,
                    key=lambda rp: (rp.permission.module, rp.permission.action),
                )
            ],
        )


class RoleResponse(RoleSummary):
    """A role as listed in the admin UI."""

    user_count: int = 0
    creator_id: UUID | None = None
    created_at: datetime
    updated_at: datetime
    permissions: list[GrantResponse] | None = None


class RoleListResponse(BaseModel):
    items: list[RoleResponse]
