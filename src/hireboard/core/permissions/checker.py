"""Permission checking against the database.

``PermissionChecker`` loads the actor, role and grants in one go and hands
the frozen view to the evaluator. Deciding is always done by
``hireboard.core.permissions.evaluator``.
"""

from typing import TYPE_CHECKING
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hireboard.core.permissions.evaluator import (
    ActorView,
    Decision,
    evaluate,
    evaluate_all,
    evaluate_any,
)
from hireboard.core.permissions.models import Permission, Role, RolePermission
from hireboard.core.permissions.views import actor_view


if TYPE_CHECKING:
    from hireboard.modules.users.models import User


logger = structlog.get_logger()


class PermissionChecker:
    """Service for checking user permissions.

    Takes an explicit session; nothing is cached between calls.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load_actor(self, user_id: UUID) -> ActorView | None:
        """Load a user with their role and grants as an ActorView.

        Args:
            user_id: The user's UUID

        Returns:
            The actor view, or None if the user does not exist
        """
        from hireboard.modules.users.models import User  # noqa: PLC0415

        stmt = (
            select(User)
            .where(User.id == user_id)
            .options(
                selectinload(User.role)
                .selectinload(Role.permissions)
                .selectinload(RolePermission.permission)
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        user = result.scalar_one_or_none()
        if user is None:
            return None
        return actor_view(user)

    async def has_permission(self, user_id: UUID, module: str, action: str) -> bool:
        """Check if a user may perform ``action`` on ``module``.

        Args:
            user_id: The user's UUID
            module: The module to check (e.g., "jobs")
            action: The action to check (e.g., "read", "create", "delete")

        Returns:
            True if allowed, False otherwise
        """
        actor = await self.load_actor(user_id)
        decision = evaluate(actor, module, action)
        _log_decision(actor, decision, [(module, action)])
        return decision is Decision.ALLOW

    async def has_any_permission(
        self,
        user_id: UUID,
        permissions: list[tuple[str, str]],
    ) -> bool:
        """Check if a user holds at least one of ``permissions``.

        Args:
            user_id: The user's UUID
            permissions: List of (module, action) tuples

        Returns:
            True if any pair is allowed
        """
        actor = await self.load_actor(user_id)
        decision = evaluate_any(actor, permissions)
        _log_decision(actor, decision, permissions)
        return decision is Decision.ALLOW

    async def has_all_permissions(
        self,
        user_id: UUID,
        permissions: list[tuple[str, str]],
    ) -> bool:
        """Check if a user holds every one of ``permissions``.

        An empty list is denied.

        Args:
            user_id: The user's UUID
            permissions: List of (module, action) tuples

        Returns:
            True if every pair is allowed
        """
        actor = await self.load_actor(user_id)
        decision = evaluate_all(actor, permissions)
        _log_decision(actor, decision, permissions)
        return decision is Decision.ALLOW

    async def get_user_permissions(self, user_id: UUID) -> set[str]:
        """Get every capability a user holds.

        Administrators hold the whole catalog.

        Args:
            user_id: The user's UUID

        Returns:
            Set of permission strings in "module:action" format
        """
        actor = await self.load_actor(user_id)
        if actor is None or actor.role is None:
            return set()

        if actor.is_active and actor.role.is_active and actor.role.is_administrator:
            result = await self.session.execute(select(Permission))
            return {permission.key for permission in result.scalars().all()}

        return {
            f"{grant.module}:{grant.action}"
            for grant in actor.role.grants
            if evaluate(actor, grant.module, grant.action)
        }


def _log_decision(
    actor: ActorView | None,
    decision: Decision,
    permissions: list[tuple[str, str]],
) -> None:
    requested = [f"{module}:{action}" for module, action in permissions]
    if actor is None:
        logger.info("permission_denied", reason="unknown_actor", permissions=requested)
        return

    if decision is Decision.DENY:
        logger.info(
            "permission_denied",
            user_id=str(actor.id),
            role=actor.role.name if actor.role else None,
            permissions=requested,
        )
    elif actor.role is not None and actor.role.is_administrator:
        logger.warning(
            "administrator_bypass",
            user_id=str(actor.id),
            permissions=requested,
        )


async def check_permission(
    user: "User | None",
    module: str,
    action: str,
    session: AsyncSession,
) -> bool:
    """Convenience function for a single check inside a route handler.

    A missing user is denied rather than raising.

    Args:
        user: The user to check
        module: The module to check
        action: The action to check
        session: Database session

    Returns:
        True if the user has the permission
    """
    if user is None:
        return False

    checker = PermissionChecker(session)
    return await checker.has_permission(user.id, module, action)
