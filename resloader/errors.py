"""Exception types raised by resource loaders."""

from __future__ import annotations


class InvalidRootError(ValueError):
    """Raised when a loader root cannot be expressed as a location URL."""


class ManifestError(ValueError):
    """Raised when a manifest file does not follow the manifest grammar."""


class PolicyViolation(PermissionError):
    """Raised by an access policy that refuses to act for a privilege context."""


class PrivilegedActionError(RuntimeError):
    """Carries a failure raised inside a policy-scoped action back to the caller."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"privileged action failed: {cause!r}")
        self.cause = cause


__all__ = [
    "InvalidRootError",
    "ManifestError",
    "PolicyViolation",
    "PrivilegedActionError",
]
