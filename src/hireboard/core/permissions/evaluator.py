"""Permission evaluation.

Decides whether an actor may perform an action on a module. The evaluator
works on an already-loaded, immutable view of the actor, their role and the
role's grants; it performs no I/O and never raises. Anything it cannot make
sense of is denied.

Evaluation order:

1. No actor, an inactive actor, no role, or an inactive role -> DENY
2. Role named exactly ``ADMINISTRATOR_ROLE_NAME`` -> ALLOW (grants are not read)
3. A grant with the same module and action and ``granted=True`` -> ALLOW
4. Anything else -> DENY

Module and action identifiers are compared as-is (case-sensitive, no
trimming), so callers must use the identifiers the grants were created with.

Note:
    The Administrator override keys off the role's display name, not its
    ``is_system`` flag. Renaming the Administrator role silently removes the
    override and leaves that role with only its explicit grants. The role
    service keeps custom roles from taking the name.
"""

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import UUID


ADMINISTRATOR_ROLE_NAME = "Administrator"


class Decision(enum.Enum):
    """Outcome of a permission evaluation."""

    ALLOW = "allow"
    DENY = "deny"

    def __bool__(self) -> bool:
        return self is Decision.ALLOW


@dataclass(frozen=True, slots=True)
class GrantView:
    """A single ``(module, action, granted)`` record attached to a role."""

    module: str
    action: str
    granted: bool


@dataclass(frozen=True, slots=True)
class RoleView:
    """A role together with every grant it owns."""

    id: UUID
    name: str
    is_system: bool
    is_active: bool
    grants: tuple[GrantView, ...] = field(default_factory=tuple)

    @property
    def is_administrator(self) -> bool:
        return self.name == ADMINISTRATOR_ROLE_NAME


@dataclass(frozen=True, slots=True)
class ActorView:
    """The authenticated caller as seen by the evaluator."""

    id: UUID
    is_active: bool
    role: RoleView | None = None


def evaluate(actor: ActorView | None, module: str, action: str) -> Decision:
    """Decide whether ``actor`` may perform ``action`` on ``module``.

    Args:
        actor: The loaded actor view, or None if no actor could be resolved
        module: Functional area identifier (e.g. "applications")
        action: Operation identifier within the module (e.g. "archive")

    Returns:
        Decision.ALLOW or Decision.DENY
    """
    if actor is None or not actor.is_active:
        return Decision.DENY

    role = actor.role
    if role is None or not role.is_active:
        return Decision.DENY

    if role.is_administrator:
        return Decision.ALLOW

    for grant in role.grants:
        if grant.module == module and grant.action == action and grant.granted is True:
            return Decision.ALLOW

    return Decision.DENY


def evaluate_any(
    actor: ActorView | None,
    permissions: Iterable[tuple[str, str]],
) -> Decision:
    """ALLOW if at least one ``(module, action)`` pair is allowed."""
    for module, action in permissions:
        if evaluate(actor, module, action):
            return Decision.ALLOW
    return Decision.DENY


def evaluate_all(
    actor: ActorView | None,
    permissions: Iterable[tuple[str, str]],
) -> Decision:
    """ALLOW only if every ``(module, action)`` pair is allowed.

    An empty set of pairs is denied.
    """
    pairs = list(permissions)
    if not pairs:
        return Decision.DENY
    for module, action in pairs:
        if not evaluate(actor, module, action):
            return Decision.DENY
    return Decision.ALLOW
