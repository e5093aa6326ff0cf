"""Role and permission repositories."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from hireboard.api.dependencies import DBSession
from hireboard.core.permissions.models import Permission, Role, RolePermission
from hireboard.modules.users.models import User


class RoleRepository:
    """Repository for Role database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    def _with_grants(self):
        return select(Role).options(
            selectinload(Role.permissions).selectinload(RolePermission.permission)
        )

    async def get_by_id(self, role_id: UUID) -> Role | None:
        stmt = self._with_grants().where(Role.id == role_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Role | None:
        stmt = self._with_grants().where(Role.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_user_counts(self) -> list[tuple[Role, int]]:
        """List roles, system roles first, then by name.

        Returns:
            List of (role, number of users holding it)
        """
        user_count = (
            select(func.count(User.id))
            .where(User.role_id == Role.id)
            .correlate(Role)
            .scalar_subquery()
        )
        stmt = (
            self._with_grants()
            .add_columns(user_count)
            .order_by(Role.is_system.desc(), Role.name)
        )
        result = await self.session.execute(stmt)
        return [(role, count) for role, count in result.all()]

    async def count_users(self, role_id: UUID) -> int:
        stmt = select(func.count()).select_from(User).where(User.role_id == role_id)
        return (await self.session.execute(stmt)).scalar_one()

    async def create(self, role: Role) -> Role:
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def update(self, role: Role) -> Role:
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def delete(self, role: Role) -> None:
        await self.session.delete(role)
        await self.session.flush()


class PermissionRepository:
    """Repository for the permission catalog."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def list_all(self) -> list[Permission]:
        stmt = select(Permission).order_by(Permission.module, Permission.action)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_many(self, permission_ids: list[UUID]) -> dict[UUID, Permission]:
        if not permission_ids:
            return {}
        stmt = select(Permission).where(Permission.id.in_(permission_ids))
        result = await self.session.execute(stmt)
        return {p.id: p for p in result.scalars().all()}


# Type aliases for dependency injection
RoleRepo = Annotated[RoleRepository, Depends(RoleRepository)]
PermissionRepo = Annotated[PermissionRepository, Depends(PermissionRepository)]
