"""User repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import func, or_, select

from hireboard.api.dependencies import DBSession
from hireboard.core.database.filters import LIKE_ESCAPE, contains_pattern
from hireboard.core.permissions.models import Role
from hireboard.modules.users.models import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, user: User) -> User:
        """Persist a new user and reload server defaults."""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> User | None:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address (case-insensitive)."""
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_page(
        self,
        page: int = 1,
        page_size: int = 20,
        search: str | None = None,
    ) -> tuple[list[User], int]:
        """List users, newest first, optionally filtered by name or email.

        Args:
            page: Page number (1-indexed)
            page_size: Number of items per page
            search: Case-insensitive substring of name or email

        Returns:
            Tuple of (users list, total count)
        """
        conditions = []
        if search:
            pattern = contains_pattern(search)
            conditions.append(
                or_(
                    func.lower(User.name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(User.email).like(pattern, escape=LIKE_ESCAPE),
                )
            )

        count_stmt = select(func.count()).select_from(User).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(User)
            .where(*conditions)
            .order_by(User.created_at.desc(), User.email)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def role_exists(self, role_id: UUID) -> bool:
        stmt = select(Role.id).where(Role.id == role_id)
        return (await self.session.execute(stmt)).scalar_one_or_none() is not None

    async def count_with_role(self, role_id: UUID) -> int:
        stmt = select(func.count()).select_from(User).where(User.role_id == role_id)
        return (await self.session.execute(stmt)).scalar_one()

    async def update(self, user: User) -> User:
        """Flush pending changes and reload the user."""
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        await self.session.delete(user)
        await self.session.flush()


# Type alias for dependency injection
UserRepo = Annotated[UserRepository, Depends(UserRepository)]
