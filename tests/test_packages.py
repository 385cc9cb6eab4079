"""Tests for resloader.packages."""

from __future__ import annotations

from resloader.manifest import parse_manifest
from resloader.models import PackageSpec
from resloader.packages import build_package_spec, package_entry_name

ROOT_URL = "file:///opt/modules/app/"


def test_package_entry_name() -> None:
    assert package_entry_name("com.example.util") == "com/example/util/"


def test_no_manifest_gives_unsealed_spec() -> None:
    spec = build_package_spec("com.example", None, ROOT_URL)

    assert spec == PackageSpec()
    assert not spec.sealed


def test_entry_attributes_override_main_attributes() -> None:
    manifest = parse_manifest(
        "Specification-Title: Demo API\n"
        "Specification-Version: 1.0\n"
        "Implementation-Vendor: Example\n"
        "\n"
        "Name: com/example/\n"
        "Specification-Version: 1.1\n"
        "Sealed: TRUE\n"
    )

    spec = build_package_spec("com.example", manifest, ROOT_URL)

    assert spec.spec_title == "Demo API"
    assert spec.spec_version == "1.1"
    assert spec.impl_vendor == "Example"
    assert spec.seal_base == ROOT_URL
    assert spec.sealed


def test_main_section_can_seal_every_package() -> None:
    manifest = parse_manifest("Sealed: true\n\nName: com/open/\nSealed: false\n")

    assert build_package_spec("com.closed", manifest, ROOT_URL).sealed
    assert not build_package_spec("com.open", manifest, ROOT_URL).sealed
