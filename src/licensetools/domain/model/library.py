"""Library records compared during a license audit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .artifact import ArtifactIdentity


@dataclass(frozen=True, slots=True, kw_only=True)
class LibraryRecord:
    """One documented or resolved library.

    Records coming from dependency resolution never carry ``copyright_holder`` or
    ``notice``; those only exist in the hand-authored manifest.
    """

    identity: ArtifactIdentity
    display_name: str
    library_name: str | None = None
    url: str | None = None
    file_name: str | None = None
    license: str | None = None
    license_url: str | None = None
    copyright_holder: str | None = None
    notice: str | None = None

    @property
    def normalized_license(self) -> str:
        return self.license or ""

    def same_library(self, other: LibraryRecord) -> bool:
        return self.identity.matches(other.identity)

    def license_matches(self, other: LibraryRecord) -> bool:
        return self.normalized_license == other.normalized_license


def sort_key(record: LibraryRecord) -> tuple[str, str, str]:
    identity = record.identity
    return (identity.group, identity.name, identity.version)
