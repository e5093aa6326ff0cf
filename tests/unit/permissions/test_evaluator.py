"""Unit tests for the permission evaluator.

The evaluator works on frozen views only, so these tests need no database.
"""

from dataclasses import FrozenInstanceError
from uuid import uuid4

import pytest

from hireboard.core.permissions.catalog import PERMISSION_CATALOG
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


pytestmark = pytest.mark.unit

ALL_PAIRS = [(entry.module, entry.action) for entry in PERMISSION_CATALOG]


def make_role(
    name: str = "Recruiter",
    grants: tuple[GrantView, ...] = (),
    is_active: bool = True,
    is_system: bool = False,
) -> RoleView:
    return RoleView(
        id=uuid4(),
        name=name,
        is_system=is_system,
        is_active=is_active,
        grants=grants,
    )


def make_actor(role: RoleView | None = None, is_active: bool = True) -> ActorView:
    return ActorView(id=uuid4(), is_active=is_active, role=role)


class TestDecision:
    def test_allow_is_truthy(self):
        assert Decision.ALLOW
        assert not Decision.DENY


class TestMissingActorOrRole:
    """Anything without a usable role is denied."""

    def test_no_actor_is_denied(self):
        assert evaluate(None, "jobs", "read") is Decision.DENY

    @pytest.mark.parametrize(("module", "action"), ALL_PAIRS)
    def test_actor_without_role_is_denied_everything(self, module: str, action: str):
        assert evaluate(make_actor(role=None), module, action) is Decision.DENY

    def test_inactive_actor_is_denied(self):
        grants = (GrantView("jobs", "read", True),)
        actor = make_actor(make_role(grants=grants), is_active=False)

        assert evaluate(actor, "jobs", "read") is Decision.DENY

    def test_inactive_role_is_denied(self):
        grants = (GrantView("jobs", "read", True),)
        actor = make_actor(make_role(grants=grants, is_active=False))

        assert evaluate(actor, "jobs", "read") is Decision.DENY

    def test_inactive_administrator_role_is_denied(self):
        actor = make_actor(make_role(ADMINISTRATOR_ROLE_NAME, is_active=False, is_system=True))

        assert evaluate(actor, "users", "delete") is Decision.DENY


class TestAdministrator:
    @pytest.mark.parametrize(("module", "action"), ALL_PAIRS)
    def test_administrator_is_allowed_everything_without_grants(self, module: str, action: str):
        actor = make_actor(make_role(ADMINISTRATOR_ROLE_NAME, is_system=True))

        assert evaluate(actor, module, action) is Decision.ALLOW

    def test_administrator_allowed_for_pairs_outside_catalog(self):
        actor = make_actor(make_role(ADMINISTRATOR_ROLE_NAME))

        assert evaluate(actor, "reports", "generate") is Decision.ALLOW

    def test_administrator_ignores_revoked_grants(self):
        grants = (GrantView("users", "delete", False),)
        actor = make_actor(make_role(ADMINISTRATOR_ROLE_NAME, grants=grants))

        assert evaluate(actor, "users", "delete") is Decision.ALLOW

    @pytest.mark.parametrize("name", ["administrator", "ADMINISTRATOR", " Administrator", "Admin"])
    def test_name_match_is_exact(self, name: str):
        actor = make_actor(make_role(name, is_system=True))

        assert evaluate(actor, "jobs", "read") is Decision.DENY


class TestGrants:
    def test_every_granted_pair_is_allowed(self):
        pairs = [("jobs", "read"), ("jobs", "update"), ("applications", "read")]
        grants = tuple(GrantView(m, a, True) for m, a in pairs)
        actor = make_actor(make_role(grants=grants))

        for module, action in pairs:
            assert evaluate(actor, module, action) is Decision.ALLOW

    def test_missing_pair_is_denied(self):
        grants = (GrantView("jobs", "read", True),)
        actor = make_actor(make_role(grants=grants))

        assert evaluate(actor, "jobs", "delete") is Decision.DENY
        assert evaluate(actor, "forms", "read") is Decision.DENY

    def test_revoked_grant_is_denied(self):
        viewer = make_role("Viewer", grants=(GrantView("jobs", "read", False),), is_system=True)

        assert evaluate(make_actor(viewer), "jobs", "read") is Decision.DENY

    def test_identifiers_are_case_sensitive(self):
        grants = (GrantView("applications", "archive", True),)
        actor = make_actor(make_role(grants=grants))

        assert evaluate(actor, "Applications", "archive") is Decision.DENY
        assert evaluate(actor, "applications", "Archive") is Decision.DENY

    def test_identifiers_are_not_trimmed(self):
        grants = (GrantView("applications", "archive", True),)
        actor = make_actor(make_role(grants=grants))

        assert evaluate(actor, "applications ", "archive") is Decision.DENY

    def test_manager_can_archive_but_not_delete(self):
        manager = make_role(
            "Manager",
            grants=(
                GrantView("applications", "read", True),
                GrantView("applications", "archive", True),
            ),
            is_system=True,
        )
        actor = make_actor(manager)

        assert evaluate(actor, "applications", "archive") is Decision.ALLOW
        assert evaluate(actor, "applications", "delete") is Decision.DENY

    def test_evaluation_is_repeatable(self):
        grants = (GrantView("jobs", "read", True), GrantView("jobs", "delete", False))
        actor = make_actor(make_role(grants=grants))

        first = [evaluate(actor, "jobs", a) for a in ("read", "delete", "create")]
        second = [evaluate(actor, "jobs", a) for a in ("read", "delete", "create")]

        assert first == second == [Decision.ALLOW, Decision.DENY, Decision.DENY]

    def test_views_are_immutable(self):
        actor = make_actor(make_role())

        with pytest.raises(FrozenInstanceError):
            actor.role = None  # type: ignore[misc]


class TestComposition:
    @pytest.fixture
    def reader(self) -> ActorView:
        return make_actor(make_role(grants=(GrantView("jobs", "read", True),)))

    def test_any_allows_if_one_matches(self, reader: ActorView):
        assert evaluate_any(reader, [("jobs", "update"), ("jobs", "read")]) is Decision.ALLOW

    def test_any_denies_if_none_match(self, reader: ActorView):
        assert evaluate_any(reader, [("jobs", "update"), ("forms", "read")]) is Decision.DENY

    def test_any_denies_empty(self, reader: ActorView):
        assert evaluate_any(reader, []) is Decision.DENY

    def test_all_requires_every_pair(self, reader: ActorView):
        assert evaluate_all(reader, [("jobs", "read")]) is Decision.ALLOW
        assert evaluate_all(reader, [("jobs", "read"), ("jobs", "update")]) is Decision.DENY

    def test_all_denies_empty(self, reader: ActorView):
        assert evaluate_all(reader, []) is Decision.DENY

    def test_composition_denies_missing_actor(self):
        assert evaluate_any(None, [("jobs", "read")]) is Decision.DENY
        assert evaluate_all(None, [("jobs", "read")]) is Decision.DENY
