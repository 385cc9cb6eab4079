"""Tests for resloader.native."""

from __future__ import annotations

from resloader.native import (
    NATIVE_SEARCH_PATHS,
    identify_cpu,
    identify_os,
    map_library_name,
    search_paths_for,
)


def test_map_library_name_per_platform() -> None:
    assert map_library_name("zip", "linux") == "libzip.so"
    assert map_library_name("zip", "darwin") == "libzip.dylib"
    assert map_library_name("zip", "win32") == "zip.dll"
    assert map_library_name("zip", "freebsd13") == "libzip.so"


def test_identify_platform_aliases() -> None:
    assert identify_os("linux") == "linux"
    assert identify_os("darwin") == "macosx"
    assert identify_os("win32") == "win"
    assert identify_os("freebsd14") == "freebsd"
    assert identify_cpu("AMD64") == "x86_64"
    assert identify_cpu("arm64") == "aarch64"
    assert identify_cpu("riscv64") == "riscv64"


def test_search_paths_are_ordered() -> None:
    assert search_paths_for("linux", "x86_64") == ("lib/linux-x86_64", "linux-x86_64", "lib")
    assert NATIVE_SEARCH_PATHS[-1] == "lib"
