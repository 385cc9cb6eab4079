"""Path helpers that keep caller-supplied names inside a loader root."""

from __future__ import annotations

from typing import List

_SEPARATORS = ("/", "\\")


def relativize(name: str) -> str:
    """Strip leading separators so ``name`` reads as a root-relative path."""
    index = 0
    while index < len(name) and name[index] in _SEPARATORS:
        index += 1
    return name[index:]


def canonicalize(path: str) -> str:
    """Collapse ``.``, ``..`` and empty segments of a relative path.

    A ``..`` that would climb above the start of the path is dropped, so the
    result never begins with ``..``. A trailing separator is preserved.
    """
    if not path:
        return path

    normalised = path.replace("\\", "/")
    trailing = normalised.endswith("/")
    parts: List[str] = []
    for segment in normalised.split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if parts:
                parts.pop()
            continue
        parts.append(segment)

    result = "/".join(parts)
    if trailing and result:
        result += "/"
    return result


def confine(name: str) -> str:
    """Return the canonical root-relative form of ``name``."""
    return canonicalize(relativize(name))


__all__ = ["canonicalize", "confine", "relativize"]
