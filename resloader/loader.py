"""Resource loader backed by a directory tree on the local filesystem."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .base import IterableResourceLoader
from .errors import InvalidRootError
from .logging import get_logger
from .manifest import Manifest, load_manifest
from .models import ClassSpec, PackageSpec, Provenance
from .native import NATIVE_SEARCH_PATHS, map_library_name
from .packages import build_package_spec
from .paths import confine
from .privileged import PrivilegeContext, run_privileged
from .resource import PathResource

_LOGGER = get_logger("loader")


def root_url(root: Path) -> str:
    """Return the ``file:`` URL of ``root``; directory URLs end with ``/``."""
    url = root.absolute().as_uri()
    if root.is_dir() and not url.endswith("/"):
        url += "/"
    return url


def _raise(error: OSError) -> None:
    raise error


class PathResourceLoader(IterableResourceLoader):
    """Serves classes, resources and native libraries from one root directory.

    The manifest and the provenance of the root are read once here and never
    reassigned, so a constructed loader is safe to share between threads.
    Every filesystem access runs through :func:`run_privileged` with the
    context handed to the constructor.
    """

    def __init__(
        self,
        root_name: str,
        root: Union[str, "os.PathLike[str]"],
        context: PrivilegeContext,
        *,
        search_paths: Optional[Sequence[str]] = None,
    ) -> None:
        if root_name is None:
            raise ValueError("root_name is None")
        if root is None:
            raise ValueError("root is None")
        if context is None:
            raise ValueError("context is None")
        self._root_name = root_name
        self._root = Path(root)
        self._context = context
        self._search_paths = tuple(NATIVE_SEARCH_PATHS if search_paths is None else search_paths)
        self._manifest = load_manifest(self._root, context)

        try:
            location = run_privileged(context, lambda: root_url(self._root))
        except ValueError as exc:
            raise InvalidRootError(f"Invalid root file specified: {root}") from exc
        self._provenance = Provenance(location=location)

    @property
    def root_name(self) -> str:
        return self._root_name

    @property
    def root(self) -> Path:
        return self._root

    @property
    def context(self) -> PrivilegeContext:
        return self._context

    @property
    def manifest(self) -> Optional[Manifest]:
        return self._manifest

    @property
    def provenance(self) -> Provenance:
        return self._provenance

    def get_library(self, name: str) -> Optional[str]:
        mapped_name = map_library_name(name)
        for segment in self._search_paths:
            candidate = self._root / segment / mapped_name
            if run_privileged(self._context, lambda: os.path.exists(candidate)):
                return str(candidate.absolute())
        _LOGGER.debug("Native library %s not found under %s", mapped_name, self._root)
        return None

    def get_class_spec(self, file_name: str) -> Optional[ClassSpec]:
        file = self._root / file_name

        def _read() -> Optional[ClassSpec]:
            if not file.exists():
                return None
            return ClassSpec(content=file.read_bytes(), provenance=self._provenance)

        return run_privileged(self._context, _read)

    def get_package_spec(self, name: str) -> PackageSpec:
        url = run_privileged(self._context, lambda: root_url(self._root))
        return build_package_spec(name, self._manifest, url)

    def get_resource(self, name: str) -> Optional[PathResource]:
        relative = confine(name).rstrip("/")
        file = self._root / relative if relative else self._root
        if not run_privileged(self._context, lambda: os.path.exists(file)):
            return None
        return PathResource(self._root, relative, self._context)

    def iterate_resources(self, start_path: str, recursive: bool) -> Iterator[PathResource]:
        relative = confine(start_path).rstrip("/")
        start = self._root / relative if relative else self._root
        try:
            names = run_privileged(self._context, lambda: self._list_files(start, recursive))
        except OSError as exc:
            _LOGGER.warning("Cannot enumerate resources under %s: %s", start, exc)
            return iter(())
        return iter([PathResource(self._root, name, self._context) for name in names])

    def get_paths(self) -> List[str]:
        try:
            return run_privileged(self._context, self._list_directories)
        except OSError as exc:
            _LOGGER.warning("Cannot enumerate paths under %s: %s", self._root, exc)
            return []

    def get_location(self) -> str:
        return run_privileged(self._context, lambda: root_url(self._root))

    # ------------------------------------------------------------------
    # Internal helpers

    def _relative_name(self, path: Path) -> str:
        return path.relative_to(self._root).as_posix()

    def _list_files(self, start: Path, recursive: bool) -> List[str]:
        if start.is_file():
            return [self._relative_name(start)]

        names: List[str] = []
        for dirpath, dirnames, filenames in os.walk(start, onerror=_raise):
            current = Path(dirpath)
            if recursive:
                dirnames.sort()
            else:
                dirnames[:] = []
            for filename in sorted(filenames):
                names.append(self._relative_name(current / filename))
        return names

    def _list_directories(self) -> List[str]:
        separator = os.sep
        paths: List[str] = []
        for dirpath, dirnames, _ in os.walk(self._root, onerror=_raise):
            dirnames.sort()
            relative = Path(dirpath).relative_to(self._root)
            result = "" if relative == Path(".") else str(relative)
            # Module paths never end with a separator.
            if result.endswith(separator):
                result = result[: -len(separator)]
            paths.append(result)
        return paths

    def __repr__(self) -> str:
        return f"PathResourceLoader(root_name={self._root_name!r}, root={str(self._root)!r})"


__all__ = ["PathResourceLoader", "root_url"]
