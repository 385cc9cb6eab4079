"""Filesystem-backed resource loading for module runtimes."""

from .base import IterableResourceLoader, Resource, ResourceLoader
from .errors import InvalidRootError, ManifestError, PolicyViolation
from .loader import PathResourceLoader
from .manifest import Manifest
from .models import ClassSpec, PackageSpec, Provenance
from .privileged import (
    UNRESTRICTED,
    AccessPolicy,
    PermissionPolicy,
    PrivilegeContext,
    install_policy,
    run_privileged,
    uninstall_policy,
)
from .resource import PathResource

__all__ = [
    "AccessPolicy",
    "ClassSpec",
    "InvalidRootError",
    "IterableResourceLoader",
    "Manifest",
    "ManifestError",
    "PackageSpec",
    "PathResource",
    "PathResourceLoader",
    "PermissionPolicy",
    "PolicyViolation",
    "PrivilegeContext",
    "Provenance",
    "Resource",
    "ResourceLoader",
    "UNRESTRICTED",
    "install_policy",
    "run_privileged",
    "uninstall_policy",
]
