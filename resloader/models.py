"""Value types returned by resource loaders."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Provenance:
    """Where loaded code came from; shared by every class of one root."""

    location: str
    signers: Tuple[str, ...] = ()


@dataclass
class ClassSpec:
    """Bytes of one compiled unit plus the provenance of its root."""

    content: bytes
    provenance: Provenance


@dataclass
class PackageSpec:
    """Package attributes derived from a root manifest."""

    spec_title: Optional[str] = None
    spec_version: Optional[str] = None
    spec_vendor: Optional[str] = None
    impl_title: Optional[str] = None
    impl_version: Optional[str] = None
    impl_vendor: Optional[str] = None
    seal_base: Optional[str] = None

    @property
    def sealed(self) -> bool:
        return self.seal_base is not None
