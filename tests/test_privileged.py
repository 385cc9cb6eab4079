"""Tests for resloader.privileged."""

from __future__ import annotations

import threading

import pytest

from resloader import privileged
from resloader.errors import PolicyViolation
from resloader.privileged import (
    AccessPolicy,
    PermissionPolicy,
    PrivilegeContext,
    current_context,
    get_policy,
    install_policy,
    run_privileged,
)

READER = PrivilegeContext(name="reader", permissions=frozenset({"fs.read"}))
GUEST = PrivilegeContext(name="guest")


def test_runs_directly_without_policy() -> None:
    caller = threading.get_ident()

    assert get_policy() is None
    assert run_privileged(GUEST, threading.get_ident) == caller
    assert run_privileged(GUEST, current_context) is None


def test_errors_pass_through_without_policy() -> None:
    def _fail() -> None:
        raise FileNotFoundError("nope")

    with pytest.raises(FileNotFoundError, match="nope"):
        run_privileged(GUEST, _fail)


def test_policy_scopes_action_to_context() -> None:
    install_policy(AccessPolicy())

    assert run_privileged(READER, current_context) is READER
    assert current_context() is None


def test_policy_preserves_original_error_type() -> None:
    install_policy(AccessPolicy())

    def _fail() -> None:
        raise IsADirectoryError("is a dir")

    with pytest.raises(IsADirectoryError, match="is a dir"):
        run_privileged(READER, _fail)


def test_policy_violation_surfaces_as_permission_error() -> None:
    install_policy(PermissionPolicy("fs.read"))
    calls = []

    with pytest.raises(PolicyViolation, match="guest"):
        run_privileged(GUEST, lambda: calls.append("ran"))

    assert calls == []
    assert run_privileged(READER, lambda: "ok") == "ok"


def test_uninstall_restores_direct_execution() -> None:
    install_policy(PermissionPolicy("fs.read"))
    privileged.uninstall_policy()

    assert run_privileged(GUEST, lambda: 42) == 42


def test_context_permissions() -> None:
    assert READER.allows("fs.read")
    assert not GUEST.allows("fs.read")
    assert READER == PrivilegeContext(name="reader", permissions=frozenset({"fs.read"}))


def test_policy_keeps_exception_chaining_of_the_action() -> None:
    install_policy(AccessPolicy())
    original = KeyError("missing inode")

    def _fail() -> None:
        raise OSError("stat failed") from original

    with pytest.raises(OSError, match="stat failed") as excinfo:
        run_privileged(READER, _fail)

    assert excinfo.value.__cause__ is original
    assert excinfo.value.__suppress_context__
