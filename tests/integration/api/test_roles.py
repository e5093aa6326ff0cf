"""Integration tests for role and permission catalog endpoints."""

import pytest
from httpx import AsyncClient

from hireboard.core.permissions.catalog import PERMISSION_CATALOG
from hireboard.core.permissions.models import Permission, Role
from hireboard.modules.users.models import User


pytestmark = pytest.mark.integration


class TestListRoles:
    async def test_system_roles_first_with_user_counts(
        self,
        client: AsyncClient,
        admin_headers,
        viewer_user: User,  # noqa: ARG002
        make_role,
    ):
        await make_role("Auditor", {"applications:read": True})

        response = await client.get("/api/v1/roles", headers=admin_headers)

        assert response.status_code == 200
        items = response.json()["items"]
        assert [r["name"] for r in items] == [
            "Administrator",
            "Human Resources",
            "Manager",
            "Viewer",
            "Auditor",
        ]
        counts = {r["name"]: r["user_count"] for r in items}
        assert counts["Administrator"] == 1
        assert counts["Viewer"] == 1
        assert counts["Auditor"] == 0
        assert items[0]["permissions"] is None

    async def test_include_permissions(self, client: AsyncClient, admin_headers):
        response = await client.get(
            "/api/v1/roles",
            params={"include_permissions": True},
            headers=admin_headers,
        )

        viewer = next(r for r in response.json()["items"] if r["name"] == "Viewer")
        assert {f"{p['module']}:{p['action']}" for p in viewer["permissions"]} == {
            "dashboard:read",
            "jobs:read",
            "applications:read",
        }

    async def test_requires_roles_read(self, client: AsyncClient, viewer_headers):
        response = await client.get("/api/v1/roles", headers=viewer_headers)

        assert response.status_code == 403


class TestPermissionCatalog:
    async def test_lists_catalog_in_order(self, client: AsyncClient, admin_headers):
        response = await client.get("/api/v1/permissions", headers=admin_headers)

        assert response.status_code == 200
        pairs = [(p["module"], p["action"]) for p in response.json()["items"]]
        assert pairs == sorted((e.module, e.action) for e in PERMISSION_CATALOG)


class TestCreateRole:
    async def test_create_custom_role(
        self,
        client: AsyncClient,
        admin_user: User,
        admin_headers,
        permissions: dict[str, Permission],
    ):
        response = await client.post(
            "/api/v1/roles",
            json={
                "name": "Recruiter",
                "description": "Screens candidates",
                "permissions": [
                    {"permission_id": str(permissions["applications:read"].id)},
                    {
                        "permission_id": str(permissions["applications:delete"].id),
                        "granted": False,
                    },
                ],
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["is_system"] is False
        assert data["is_active"] is True
        assert data["creator_id"] == str(admin_user.id)
        assert data["user_count"] == 0
        assert {(p["action"], p["granted"]) for p in data["permissions"]} == {
            ("read", True),
            ("delete", False),
        }

    async def test_duplicate_name(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/roles",
            json={"name": "Viewer"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["type"].endswith("/role_exists")

    async def test_duplicate_grant(
        self,
        client: AsyncClient,
        admin_headers,
        permissions: dict[str, Permission],
    ):
        permission_id = str(permissions["jobs:read"].id)
        response = await client.post(
            "/api/v1/roles",
            json={
                "name": "Confused",
                "permissions": [
                    {"permission_id": permission_id, "granted": True},
                    {"permission_id": permission_id, "granted": False},
                ],
            },
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert response.json()["type"].endswith("/duplicate_grant")

    async def test_administrator_name_is_reserved(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/roles",
            json={"name": "Administrator"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["type"].endswith("/reserved_role_name")

    async def test_requires_roles_create(self, client: AsyncClient, viewer_headers):
        response = await client.post(
            "/api/v1/roles",
            json={"name": "Sneaky"},
            headers=viewer_headers,
        )

        assert response.status_code == 403


class TestUpdateRole:
    async def test_grants_are_replaced(
        self,
        client: AsyncClient,
        admin_headers,
        make_role,
        permissions: dict[str, Permission],
    ):
        role = await make_role("Recruiter", {"jobs:read": True, "jobs:update": True})

        response = await client.put(
            f"/api/v1/roles/{role.id}",
            json={
                "name": "Senior Recruiter",
                "is_active": False,
                "permissions": [
                    {"permission_id": str(permissions["jobs:read"].id), "granted": False},
                    {"permission_id": str(permissions["forms:read"].id)},
                ],
            },
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Senior Recruiter"
        assert data["is_active"] is False
        assert {
            (f"{p['module']}:{p['action']}", p["granted"]) for p in data["permissions"]
        } == {("jobs:read", False), ("forms:read", True)}

    async def test_role_edit_changes_access(
        self,
        client: AsyncClient,
        admin_headers,
        viewer_user: User,
        viewer_headers,
        roles: dict[str, Role],
        permissions: dict[str, Permission],
    ):
        viewer = roles["Viewer"]
        assert (await client.get("/api/v1/jobs", headers=viewer_headers)).status_code == 200

        await client.put(
            f"/api/v1/roles/{viewer.id}",
            json={
                "name": "Viewer",
                "permissions": [
                    {"permission_id": str(permissions["jobs:read"].id), "granted": False},
                ],
            },
            headers=admin_headers,
        )

        response = await client.get("/api/v1/jobs", headers=viewer_headers)
        assert response.status_code == 403
        assert viewer_user.role_id == viewer.id

    async def test_custom_role_cannot_take_administrator_name(
        self,
        client: AsyncClient,
        admin_headers,
        make_role,
        make_user,
        auth_headers,
        roles: dict[str, Role],
    ):
        renamed = await client.put(
            f"/api/v1/roles/{roles['Administrator'].id}",
            json={"name": "Root"},
            headers=admin_headers,
        )
        assert renamed.status_code == 200
        editor_role = await make_role("Role Editor", {"roles:update": True})
        editor = await make_user(editor_role)

        response = await client.put(
            f"/api/v1/roles/{editor_role.id}",
            json={"name": "Administrator"},
            headers=auth_headers(editor),
        )

        assert response.status_code == 400
        assert response.json()["type"].endswith("/reserved_role_name")
        listed = await client.get("/api/v1/jobs", headers=auth_headers(editor))
        assert listed.status_code == 403

    async def test_unknown_role(self, client: AsyncClient, admin_headers):
        response = await client.put(
            "/api/v1/roles/00000000-0000-0000-0000-000000000000",
            json={"name": "Ghost"},
            headers=admin_headers,
        )

        assert response.status_code == 404


class TestDeleteRole:
    async def test_delete_unused_custom_role(self, client: AsyncClient, admin_headers, make_role):
        role = await make_role("Temporary", {"jobs:read": True})

        response = await client.delete(f"/api/v1/roles/{role.id}", headers=admin_headers)

        assert response.status_code == 204
        follow_up = await client.get(f"/api/v1/roles/{role.id}", headers=admin_headers)
        assert follow_up.status_code == 404

    async def test_administrator_role_is_protected(
        self,
        client: AsyncClient,
        admin_headers,
        roles: dict[str, Role],
    ):
        response = await client.delete(
            f"/api/v1/roles/{roles['Administrator'].id}",
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["type"].endswith("/system_role_protected")

    async def test_role_in_use(
        self,
        client: AsyncClient,
        admin_headers,
        viewer_user: User,  # noqa: ARG002
        roles: dict[str, Role],
    ):
        response = await client.delete(
            f"/api/v1/roles/{roles['Viewer'].id}",
            headers=admin_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["type"].endswith("/role_in_use")
        assert body["user_count"] == 1
