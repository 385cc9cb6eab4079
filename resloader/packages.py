"""Package attribute resolution from a root manifest."""

from __future__ import annotations

from typing import Optional

from .manifest import Manifest
from .models import PackageSpec

SPECIFICATION_TITLE = "Specification-Title"
SPECIFICATION_VERSION = "Specification-Version"
SPECIFICATION_VENDOR = "Specification-Vendor"
IMPLEMENTATION_TITLE = "Implementation-Title"
IMPLEMENTATION_VERSION = "Implementation-Version"
IMPLEMENTATION_VENDOR = "Implementation-Vendor"
SEALED = "Sealed"


def package_entry_name(name: str) -> str:
    """Return the manifest section name describing package ``name``."""
    return name.replace(".", "/") + "/"


def build_package_spec(name: str, manifest: Optional[Manifest], root_url: str) -> PackageSpec:
    """Build the spec for package ``name``; entry attributes override main ones."""
    if manifest is None:
        return PackageSpec()

    entry = package_entry_name(name)
    spec = PackageSpec(
        spec_title=manifest.get_value(entry, SPECIFICATION_TITLE),
        spec_version=manifest.get_value(entry, SPECIFICATION_VERSION),
        spec_vendor=manifest.get_value(entry, SPECIFICATION_VENDOR),
        impl_title=manifest.get_value(entry, IMPLEMENTATION_TITLE),
        impl_version=manifest.get_value(entry, IMPLEMENTATION_VERSION),
        impl_vendor=manifest.get_value(entry, IMPLEMENTATION_VENDOR),
    )
    sealed = manifest.get_value(entry, SEALED)
    if sealed is not None and sealed.strip().lower() == "true":
        spec.seal_base = root_url
    return spec


__all__ = ["build_package_spec", "package_entry_name"]
