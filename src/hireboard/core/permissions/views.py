"""Conversion from ORM rows to evaluator views."""

from typing import TYPE_CHECKING

from hireboard.core.permissions.evaluator import ActorView, GrantView, RoleView
from hireboard.core.permissions.models import Role


if TYPE_CHECKING:
    from hireboard.modules.users.models import User


def role_view(role: Role) -> RoleView:
    """Freeze a loaded Role and its grants into a RoleView.

    ``role.permissions`` and each grant's ``permission`` must already be
    loaded.
    """
    return RoleView(
        id=role.id,
        name=role.name,
        is_system=role.is_system,
        is_active=role.is_active,
        grants=tuple(
            GrantView(
                module=rp.permission.module,
                action=rp.permission.action,
                granted=rp.granted,
            )
            for rp in role.permissions
        ),
    )


def actor_view(user: "User") -> ActorView:
    """Freeze a loaded User into an ActorView."""
    return ActorView(
        id=user.id,
        is_active=user.is_active,
        role=role_view(user.role) if user.role is not None else None,
    )
