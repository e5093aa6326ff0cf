"""Permission system database models.

RBAC tables:
- Permission: a ``(module, action)`` capability from the catalog
- Role: a named bundle of grants; each user holds at most one role
- RolePermission: association carrying the ``granted`` flag
"""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hireboard.core.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_PERMISSION_ACTION_LENGTH,
    MAX_PERMISSION_MODULE_LENGTH,
    MAX_ROLE_NAME_LENGTH,
)
from hireboard.core.database.base import Base, TimestampMixin, UUIDMixin


if TYPE_CHECKING:
    from hireboard.modules.users.models import User


class Permission(Base, UUIDMixin, TimestampMixin):
    """A capability that can be granted to roles.

    Attributes:
        module: Functional area (e.g. "jobs", "applications")
        action: Operation within the module (e.g. "read", "archive")
        name: Display name shown in the role editor
        description: Human-readable description

    Examples:
        - module="applications", action="archive" -> Archive Applications
        - module="roles", action="assign" -> Assign Roles
    """

    __tablename__ = "permissions"
    __table_args__ = (
        UniqueConstraint("module", "action", name="uq_permission_module_action"),
    )

    module: Mapped[str] = mapped_column(
        String(MAX_PERMISSION_MODULE_LENGTH),
        nullable=False,
        index=True,
    )
    action: Mapped[str] = mapped_column(
        String(MAX_PERMISSION_ACTION_LENGTH),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=True,
    )

    @property
    def key(self) -> str:
        """Return the permission as 'module:action'."""
        return f"{self.module}:{self.action}"

    def __repr__(self) -> str:
        return f"<Permission({self.module}:{self.action})>"


class Role(Base, UUIDMixin, TimestampMixin):
    """A named set of grants.

    Attributes:
        name: Unique role name; "Administrator" is reserved for the root role
        description: Human-readable description
        is_system: Built-in role created by the catalog sync
        is_active: Inactive roles grant nothing
        creator_id: User who created a custom role
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(MAX_ROLE_NAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=True,
    )
    is_system: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    # No FK: users.role_id already points at roles
    creator_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        nullable=True,
    )

    # Relationships
    permissions: Mapped[list["RolePermission"]] = relationship(
        "RolePermission",
        back_populates="role",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    users: Mapped[list["User"]] = relationship(
        "User",
        back_populates="role",
        foreign_keys="User.role_id",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name}, is_system={self.is_system})>"


class RolePermission(Base, TimestampMixin):
    """Association between a role and a permission.

    A role holds at most one row per permission, which is what keeps a role
    to a single grant per ``(module, action)``.
    """

    __tablename__ = "role_permissions"
    __table_args__ = (
        UniqueConstraint("role_id", "permission_id", name="uq_role_permission"),
    )

    role_id: Mapped[UUID] = mapped_column(
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    permission_id: Mapped[UUID] = mapped_column(
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    granted: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    role: Mapped["Role"] = relationship("Role", back_populates="permissions")
    permission: Mapped["Permission"] = relationship("Permission", lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<RolePermission(role_id={self.role_id}, "
            f"permission_id={self.permission_id}, granted={self.granted})>"
        )
