"""Filesystem-backed resources served by :class:`~resloader.loader.PathResourceLoader`."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from .base import Resource
from .privileged import PrivilegeContext, run_privileged


class PathResource(Resource):
    """One file below a loader root, read lazily under the loader's context."""

    def __init__(self, root: Path, name: str, context: PrivilegeContext) -> None:
        self._root = root
        self._name = name
        self._context = context
        self._path = root / name if name else root

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def context(self) -> PrivilegeContext:
        return self._context

    def url(self) -> str:
        return run_privileged(self._context, lambda: self._path.absolute().as_uri())

    def open(self) -> BinaryIO:
        return run_privileged(self._context, lambda: self._path.open("rb"))

    def size(self) -> int:
        return run_privileged(self._context, lambda: self._path.stat().st_size)

    def read_bytes(self) -> bytes:
        return run_privileged(self._context, self._path.read_bytes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathResource):
            return NotImplemented
        return self._path == other._path and self._context == other._context

    def __hash__(self) -> int:
        return hash((self._path, self._context))

    def __repr__(self) -> str:
        return f"PathResource(name={self._name!r}, root={str(self._root)!r})"


__all__ = ["PathResource"]
