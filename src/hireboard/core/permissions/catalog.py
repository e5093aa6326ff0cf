"""Built-in permission catalog and system roles.

``sync_catalog`` is idempotent: it inserts missing permissions, system roles
and system-role grants, and leaves anything an administrator has changed
alone.
"""

from dataclasses import dataclass

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hireboard.core.permissions.evaluator import ADMINISTRATOR_ROLE_NAME
from hireboard.core.permissions.models import Permission, Role, RolePermission


logger = structlog.get_logger()


@dataclass(frozen=True)
class CatalogEntry:
    module: str
    action: str
    name: str
    description: str


PERMISSION_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("dashboard", "read", "View Dashboard", "View dashboard statistics and insights"),
    CatalogEntry("jobs", "create", "Create Jobs", "Create new job postings"),
    CatalogEntry("jobs", "read", "View Jobs", "View job postings and details"),
    CatalogEntry("jobs", "update", "Edit Jobs", "Edit existing job postings"),
    CatalogEntry("jobs", "delete", "Delete Jobs", "Delete job postings"),
    CatalogEntry("jobs", "assign", "Assign Jobs", "Assign jobs to other users"),
    CatalogEntry("jobs", "pause", "Pause Jobs", "Pause/unpause job postings"),
    CatalogEntry("applications", "read", "View Applications", "View job applications"),
    CatalogEntry("applications", "update", "Manage Applications", "Update application status and add remarks"),
    CatalogEntry("applications", "archive", "Archive Applications", "Archive and unarchive applications"),
    CatalogEntry("applications", "export", "Export Applications", "Export application data"),
    CatalogEntry("applications", "delete", "Delete Applications", "Permanently delete applications"),
    CatalogEntry("users", "create", "Create Users", "Create new user accounts"),
    CatalogEntry("users", "read", "View Users", "View user accounts and profiles"),
    CatalogEntry("users", "update", "Edit Users", "Edit user accounts and profiles"),
    CatalogEntry("users", "delete", "Delete Users", "Delete user accounts"),
    CatalogEntry("users", "activate", "Activate/Deactivate Users", "Activate or deactivate user accounts"),
    CatalogEntry("roles", "create", "Create Roles", "Create new roles"),
    CatalogEntry("roles", "read", "View Roles", "View roles and permissions"),
    CatalogEntry("roles", "update", "Edit Roles", "Edit roles and permissions"),
    CatalogEntry("roles", "delete", "Delete Roles", "Delete custom roles"),
    CatalogEntry("roles", "assign", "Assign Roles", "Assign roles to users"),
    CatalogEntry("settings", "read", "View Settings", "View system settings"),
    CatalogEntry("settings", "update", "Manage Settings", "Update system settings and configuration"),
    CatalogEntry("email", "read", "View Email Templates", "View email templates and logs"),
    CatalogEntry("email", "update", "Manage Email Templates", "Edit email templates and settings"),
    CatalogEntry("forms", "create", "Create Forms", "Create application forms"),
    CatalogEntry("forms", "read", "View Forms", "View application forms"),
    CatalogEntry("forms", "update", "Edit Forms", "Edit application forms"),
    CatalogEntry("forms", "delete", "Delete Forms", "Delete application forms"),
)


def _modules(*names: str) -> set[tuple[str, str]]:
    return {(e.module, e.action) for e in PERMISSION_CATALOG if e.module in names}


# role name -> (description, granted (module, action) pairs)
SYSTEM_ROLES: dict[str, tuple[str, set[tuple[str, str]]]] = {
    ADMINISTRATOR_ROLE_NAME: (
        "Full system access with all permissions",
        {(e.module, e.action) for e in PERMISSION_CATALOG},
    ),
    "Human Resources": (
        "HR staff with job and application management access",
        _modules("dashboard", "jobs", "applications", "forms", "email") | {("users", "read")},
    ),
    "Manager": (
        "Department managers with team oversight capabilities",
        _modules("dashboard")
        | {
            ("jobs", "read"),
            ("jobs", "update"),
            ("jobs", "assign"),
            ("applications", "read"),
            ("applications", "update"),
            ("applications", "archive"),
            ("users", "read"),
        },
    ),
    "Viewer": (
        "Read-only access to applications and basic data",
        {("dashboard", "read"), ("jobs", "read"), ("applications", "read")},
    ),
}


async def sync_catalog(session: AsyncSession) -> dict[str, int]:
    """Insert missing catalog permissions, system roles and their grants.

    Args:
        session: Database session; the caller commits

    Returns:
        Counts of created permissions, roles and grants
    """
    created = {"permissions": 0, "roles": 0, "grants": 0}

    result = await session.execute(select(Permission))
    by_pair = {(p.module, p.action): p for p in result.scalars().all()}

    for entry in PERMISSION_CATALOG:
        if (entry.module, entry.action) in by_pair:
            continue
        permission = Permission(
            module=entry.module,
            action=entry.action,
            name=entry.name,
            description=entry.description,
        )
        session.add(permission)
        by_pair[(entry.module, entry.action)] = permission
        created["permissions"] += 1
    await session.flush()

    for role_name, (description, pairs) in SYSTEM_ROLES.items():
        result = await session.execute(select(Role).where(Role.name == role_name))
        role = result.scalar_one_or_none()
        if role is None:
            role = Role(
                name=role_name,
                description=description,
                is_system=True,
                is_active=True,
                permissions=[],
            )
            session.add(role)
            created["roles"] += 1

        existing = {rp.permission_id for rp in role.permissions}
        for pair in sorted(pairs):
            permission = by_pair[pair]
            if permission.id in existing:
                continue
            role.permissions.append(RolePermission(permission=permission, granted=True))
            created["grants"] += 1

    await session.flush()

    logger.info("permission_catalog_synced", **created)
    return created
