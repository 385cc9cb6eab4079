"""Contracts shared by resource loaders and the resources they hand out."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, Collection, Iterator, Optional

from .models import ClassSpec, PackageSpec


class Resource(ABC):
    """A single named entry a loader can serve."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Root-relative name using ``/`` separators."""

    @abstractmethod
    def url(self) -> str:
        """Return the location URL of the entry."""

    @abstractmethod
    def open(self) -> BinaryIO:
        """Open the entry for binary reading."""

    @abstractmethod
    def size(self) -> int:
        """Return the entry size in bytes."""

    def read_bytes(self) -> bytes:
        with self.open() as handle:
            return handle.read()


class ResourceLoader(ABC):
    """Contract consumed by the module runtime to look up code and resources."""

    @property
    @abstractmethod
    def root_name(self) -> str:
        """Caller-supplied label of this loader's root."""

    @abstractmethod
    def get_class_spec(self, file_name: str) -> Optional[ClassSpec]:
        """Return the compiled unit stored at ``file_name``, or None."""

    @abstractmethod
    def get_package_spec(self, name: str) -> PackageSpec:
        """Return the attributes of package ``name``."""

    @abstractmethod
    def get_resource(self, name: str) -> Optional[Resource]:
        """Return the resource called ``name``, or None."""

    @abstractmethod
    def get_library(self, name: str) -> Optional[str]:
        """Return the absolute path of native library ``name``, or None."""

    @abstractmethod
    def get_paths(self) -> Collection[str]:
        """Return every directory this loader can serve entries from."""

    @abstractmethod
    def get_location(self) -> str:
        """Return the URI of this loader's root."""

    def get_root_name(self) -> str:
        return self.root_name


class IterableResourceLoader(ResourceLoader):
    """A loader that can enumerate its resources."""

    @abstractmethod
    def iterate_resources(self, start_path: str, recursive: bool) -> Iterator[Resource]:
        """Iterate resources below ``start_path``."""
