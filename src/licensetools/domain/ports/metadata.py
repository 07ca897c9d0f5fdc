"""Ports for fetching license metadata of a published artifact."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from licensetools.domain.model import ArtifactIdentity


class MetadataUnavailableError(RuntimeError):
    """Raised when license metadata cannot be retrieved for an artifact."""

    def __init__(self, identity: ArtifactIdentity, reason: str) -> None:
        self.identity = identity
        self.reason = reason
        super().__init__(f"Unable to retrieve license for {identity}: {reason}")


@dataclass(frozen=True, slots=True)
class LicenseEntry:
    name: str | None = None
    url: str | None = None


@dataclass(frozen=True, slots=True)
class LibraryMetadata:
    """License and project metadata published alongside an artifact."""

    licenses: tuple[LicenseEntry, ...] = ()
    name: str | None = None
    url: str | None = None

    @property
    def primary_license(self) -> LicenseEntry | None:
        return self.licenses[0] if self.licenses else None


@runtime_checkable
class LibraryMetadataFetcher(Protocol):
    """Callable port returning metadata for ``group:name:version``.

    Implementations raise ``MetadataUnavailableError`` for anything that keeps them
    from answering (missing POM, network failure, unreadable document).
    """

    def __call__(self, identity: ArtifactIdentity) -> LibraryMetadata: ...


__all__ = [
    "LibraryMetadata",
    "LibraryMetadataFetcher",
    "LicenseEntry",
    "MetadataUnavailableError",
]
