"""Run filesystem work on behalf of a loader's privilege context.

Hosts without an access policy pay nothing: :func:`run_privileged` calls the
action directly. Once a host installs an :class:`AccessPolicy`, every action
runs scoped to the loader's :class:`PrivilegeContext` and failures cross the
policy boundary wrapped in :class:`PrivilegedActionError`, which
:func:`run_privileged` unwraps so callers see the original exception type.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Optional, TypeVar

from .errors import PolicyViolation, PrivilegedActionError
from .logging import get_logger

T = TypeVar("T")

_LOGGER = get_logger("privileged")


@dataclass(frozen=True)
class PrivilegeContext:
    """Opaque capability token identifying whose privileges an action uses."""

    name: str
    permissions: FrozenSet[str] = field(default_factory=frozenset)

    def allows(self, permission: str) -> bool:
        return permission in self.permissions


UNRESTRICTED = PrivilegeContext(name="unrestricted")

_current_context: contextvars.ContextVar[Optional[PrivilegeContext]] = contextvars.ContextVar(
    "resloader_privilege_context", default=None
)


def current_context() -> Optional[PrivilegeContext]:
    """Return the context of the enclosing policy-scoped action, if any."""
    return _current_context.get()


class AccessPolicy:
    """Process-wide access policy; subclasses override :meth:`check`."""

    def check(self, context: PrivilegeContext) -> None:
        """Raise :class:`PolicyViolation` when ``context`` may not act."""

    def run_scoped(self, context: PrivilegeContext, action: Callable[[], T]) -> T:
        token = _current_context.set(context)
        try:
            self.check(context)
            return action()
        except Exception as exc:
            raise PrivilegedActionError(exc) from exc
        finally:
            _current_context.reset(token)


class PermissionPolicy(AccessPolicy):
    """Allows only contexts that carry a required permission."""

    def __init__(self, permission: str) -> None:
        self.permission = permission

    def check(self, context: PrivilegeContext) -> None:
        if not context.allows(self.permission):
            raise PolicyViolation(
                f"context {context.name!r} lacks permission {self.permission!r}"
            )


_policy: Optional[AccessPolicy] = None


def install_policy(policy: AccessPolicy) -> None:
    global _policy
    _policy = policy
    _LOGGER.debug("Installed access policy %s", type(policy).__name__)


def uninstall_policy() -> None:
    global _policy
    _policy = None


def get_policy() -> Optional[AccessPolicy]:
    return _policy


def run_privileged(context: PrivilegeContext, action: Callable[[], T]) -> T:
    """Run ``action`` directly, or scoped to ``context`` when a policy is installed."""
    policy = _policy
    if policy is None:
        return action()
    try:
        return policy.run_scoped(context, action)
    except PrivilegedActionError as exc:
        cause = exc.cause
    # Raised outside the handler so the cause keeps its own chaining.
    raise cause


__all__ = [
    "AccessPolicy",
    "PermissionPolicy",
    "PrivilegeContext",
    "UNRESTRICTED",
    "current_context",
    "get_policy",
    "install_policy",
    "run_privileged",
    "uninstall_policy",
]
