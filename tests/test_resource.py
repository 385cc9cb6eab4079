"""Tests for resloader.resource."""

from __future__ import annotations

import pytest

from resloader import privileged
from resloader.errors import PolicyViolation
from resloader.privileged import PermissionPolicy, PrivilegeContext
from resloader.resource import PathResource


def test_resource_reads_lazily(tree_builder) -> None:
    tree_builder.write({"data/blob.bin": b"\x00\x01\x02"})
    resource = PathResource(tree_builder.path(), "data/blob.bin", privileged.UNRESTRICTED)

    assert resource.name == "data/blob.bin"
    assert resource.size() == 3
    assert resource.read_bytes() == b"\x00\x01\x02"
    with resource.open() as handle:
        assert handle.read(1) == b"\x00"
    assert resource.url().endswith("/root/data/blob.bin")


def test_resource_equality_uses_path_and_context(tree_builder) -> None:
    root = tree_builder.path()
    first = PathResource(root, "a.txt", privileged.UNRESTRICTED)
    second = PathResource(root, "a.txt", privileged.UNRESTRICTED)
    other = PathResource(root, "a.txt", PrivilegeContext(name="other"))

    assert first == second
    assert hash(first) == hash(second)
    assert first != other


def test_resource_reads_under_its_context(tree_builder) -> None:
    tree_builder.write({"a.txt": "a"})
    privileged.install_policy(PermissionPolicy("fs.read"))
    guest = PathResource(tree_builder.path(), "a.txt", PrivilegeContext(name="guest"))
    reader = PathResource(
        tree_builder.path(), "a.txt", PrivilegeContext("reader", frozenset({"fs.read"}))
    )

    with pytest.raises(PolicyViolation):
        guest.read_bytes()
    assert reader.read_bytes() == b"a"
