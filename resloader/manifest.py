"""Reading the optional ``META-INF/MANIFEST.MF`` file of a loader root."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import ManifestError
from .logging import get_logger
from .privileged import PrivilegeContext, run_privileged

MANIFEST_PATH = ("META-INF", "MANIFEST.MF")

_LOGGER = get_logger("manifest")


class Attributes(Mapping[str, str]):
    """Manifest attributes; header names compare case-insensitively."""

    def __init__(self, items: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, Tuple[str, str]] = {}
        for key, value in (items or {}).items():
            self[key] = value

    def __setitem__(self, key: str, value: str) -> None:
        self._values[key.lower()] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._values[key.lower()][1]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._values.values())

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __repr__(self) -> str:
        return f"Attributes({dict(self.items())!r})"


@dataclass
class Manifest:
    """Parsed manifest: main attributes plus named entry sections."""

    main_attributes: Attributes = field(default_factory=Attributes)
    entries: Dict[str, Attributes] = field(default_factory=dict)

    def get_attributes(self, name: str) -> Optional[Attributes]:
        return self.entries.get(name)

    def get_value(self, name: str, key: str) -> Optional[str]:
        """Return ``key`` from entry ``name``, falling back to the main section."""
        entry = self.entries.get(name)
        if entry is not None and key in entry:
            return entry[key]
        return self.main_attributes.get(key)


def parse_manifest(text: str) -> Manifest:
    """Parse manifest text into a :class:`Manifest`.

    Headers are ``Name: value`` pairs; a line starting with a single space
    continues the previous value; blank lines end a section and every section
    after the first must open with a ``Name`` header.
    """
    manifest = Manifest()
    sections = _split_sections(text.splitlines())
    if not sections:
        return manifest

    first, *rest = sections
    for key, value in first:
        manifest.main_attributes[key] = value

    for headers in rest:
        key, value = headers[0]
        if key.lower() != "name":
            raise ManifestError(f"Expected 'Name' header, found {key!r}")
        attributes = manifest.entries.setdefault(value, Attributes())
        for key, value in headers[1:]:
            attributes[key] = value
    return manifest


def _split_sections(lines: List[str]) -> List[List[Tuple[str, str]]]:
    sections: List[List[Tuple[str, str]]] = []
    current: List[Tuple[str, str]] = []
    for number, line in enumerate(lines, start=1):
        if not line:
            if current:
                sections.append(current)
                current = []
            continue
        if line.startswith(" "):
            if not current:
                raise ManifestError(f"Continuation without header on line {number}")
            key, value = current[-1]
            current[-1] = (key, value + line[1:])
            continue
        key, sep, value = line.partition(": ")
        if not sep or not key or not _valid_header_name(key):
            raise ManifestError(f"Invalid header field on line {number}: {line!r}")
        current.append((key, value))
    if current:
        sections.append(current)
    return sections


def _valid_header_name(key: str) -> bool:
    return len(key) <= 70 and all(char.isalnum() or char in "-_" for char in key)


def load_manifest(root: Path, context: PrivilegeContext) -> Optional[Manifest]:
    """Return the root manifest, or ``None`` when it is absent or unusable."""
    manifest_file = root.joinpath(*MANIFEST_PATH)

    def _read() -> Optional[Manifest]:
        if manifest_file.is_dir():
            return None
        return parse_manifest(manifest_file.read_bytes().decode("utf-8"))

    try:
        return run_privileged(context, _read)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as exc:
        _LOGGER.debug("Ignoring unreadable manifest %s: %s", manifest_file, exc)
        return None


__all__ = ["Attributes", "MANIFEST_PATH", "Manifest", "load_manifest", "parse_manifest"]
