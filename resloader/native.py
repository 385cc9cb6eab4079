"""Platform naming rules for native libraries shipped inside a root."""

from __future__ import annotations

import platform
import sys
from typing import Tuple

_CPU_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "x86-64": "x86_64",
    "i386": "i686",
    "i486": "i686",
    "i586": "i686",
    "x86": "i686",
    "arm64": "aarch64",
    "armv7l": "armv7",
    "ppc64el": "ppc64le",
}

_OS_ALIASES = {
    "darwin": "macosx",
    "win32": "win",
    "cygwin": "win",
}


def map_library_name(name: str, os_name: str | None = None) -> str:
    """Return the platform file name for native library ``name``."""
    os_id = identify_os(os_name)
    if os_id == "win":
        return f"{name}.dll"
    if os_id == "macosx":
        return f"lib{name}.dylib"
    return f"lib{name}.so"


def identify_os(os_name: str | None = None) -> str:
    raw = (os_name or sys.platform).lower()
    for prefix, alias in _OS_ALIASES.items():
        if raw.startswith(prefix):
            return alias
    if raw.startswith("linux"):
        return "linux"
    return raw.rstrip("0123456789") or raw


def identify_cpu(machine: str | None = None) -> str:
    raw = (machine or platform.machine() or "unknown").lower()
    return _CPU_ALIASES.get(raw, raw)


def search_paths_for(os_id: str, cpu_id: str) -> Tuple[str, ...]:
    """Return the ordered directory segments probed for native libraries."""
    platform_id = f"{os_id}-{cpu_id}"
    return (f"lib/{platform_id}", platform_id, "lib")


NATIVE_SEARCH_PATHS: Tuple[str, ...] = search_paths_for(identify_os(), identify_cpu())


__all__ = [
    "NATIVE_SEARCH_PATHS",
    "identify_cpu",
    "identify_os",
    "map_library_name",
    "search_paths_for",
]
