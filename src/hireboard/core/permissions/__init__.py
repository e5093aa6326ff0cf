"""Role-based access control (RBAC)."""

from hireboard.core.permissions.checker import PermissionChecker, check_permission
from hireboard.core.permissions.decorators import (
    require_all_permissions,
    require_any_permission,
    require_permission,
)
from hireboard.core.permissions.evaluator import (
    ADMINISTRATOR_ROLE_NAME,
    ActorView,
    Decision,
    GrantView,
    RoleView,
    evaluate,
    evaluate_all,
    evaluate_any,
)
from hireboard.core.permissions.models import Permission, Role, RolePermission


__all__ = [
    "ADMINISTRATOR_ROLE_NAME",
    # Evaluator
    "ActorView",
    "Decision",
    "GrantView",
    # Models
    "Permission",
    # Checker
    "PermissionChecker",
    "Role",
    "RolePermission",
    "RoleView",
    "check_permission",
    "evaluate",
    "evaluate_all",
    "evaluate_any",
    # Decorators
    "require_all_permissions",
    "require_any_permission",
    "require_permission",
]
