"""Permission decorators for route protection.

The decorated route must declare ``current_user`` and ``db`` parameters
(normally ``CurrentUser`` and ``DBSession``); the decorator reads them from
the keyword arguments FastAPI passes in.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar, cast
from uuid import UUID

from hireboard.core.errors import ForbiddenError
from hireboard.core.permissions.checker import PermissionChecker


if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from hireboard.modules.users.models import User


P = ParamSpec("P")
R = TypeVar("R")

Check = Callable[[PermissionChecker, UUID], Awaitable[bool]]
Decorator = Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]


def _get_user_and_db(
    kwargs: dict[str, Any],
) -> tuple["User | None", "AsyncSession | None"]:
    user = cast("User | None", kwargs.get("current_user"))
    db = cast("AsyncSession | None", kwargs.get("db"))
    return user, db


def _guard(check: Check) -> Decorator:
    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            user, db = _get_user_and_db(kwargs)

            if not user:
                raise ForbiddenError(
                    "Authentication required",
                    error_code="auth_required",
                )

            if not db:
                raise ForbiddenError(
                    "Permission check failed",
                    error_code="permission_check_failed",
                )

            if not await check(PermissionChecker(db), user.id):
                raise ForbiddenError()

            return await func(*args, **kwargs)

        return wrapper

    return decorator


def require_any_permission(permissions: list[tuple[str, str]]) -> Decorator:
    """Decorator that requires any one of the given permissions.

    Usage:
        @router.get("/applications")
        @require_any_permission([("applications", "read"), ("dashboard", "read")])
        async def list_applications(current_user: CurrentUser, db: DBSession):
            ...

    Args:
        permissions: List of (module, action) tuples

    Returns:
        Decorator function

    Raises:
        ForbiddenError: If the user holds none of the permissions
    """
    return _guard(lambda checker, user_id: checker.has_any_permission(user_id, permissions))


def require_all_permissions(permissions: list[tuple[str, str]]) -> Decorator:
    """Decorator that requires every one of the given permissions.

    Usage:
        @router.get("/applications/export")
        @require_all_permissions([("applications", "read"), ("applications", "export")])
        async def export_applications(current_user: CurrentUser, db: DBSession):
            ...

    Raises:
        ForbiddenError: If the user lacks any of the permissions
    """
    return _guard(lambda checker, user_id: checker.has_all_permissions(user_id, permissions))


def require_permission(module: str, action: str) -> Decorator:
    """Decorator that requires a single permission.

    Usage:
        @router.put("/{application_id}/archive")
        @require_permission("applications", "archive")
        async def archive(application_id: UUID, current_user: CurrentUser, db: DBSession):
            ...

    Args:
        module: The module being accessed (e.g., "applications")
        action: The action being performed (e.g., "archive")

    Returns:
        Decorator function
    """
    return require_any_permission([(module, action)])
