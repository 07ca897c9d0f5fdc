"""Domain model for dependency license audits."""

from __future__ import annotations

from .artifact import (
    UNSPECIFIED_VERSION,
    WILDCARD_VERSION,
    ArtifactIdentity,
    MalformedIdentityError,
)
from .build import ArtifactKind, ResolvedArtifact
from .library import LibraryRecord, sort_key

__all__ = [
    "UNSPECIFIED_VERSION",
    "WILDCARD_VERSION",
    "ArtifactIdentity",
    "ArtifactKind",
    "LibraryRecord",
    "MalformedIdentityError",
    "ResolvedArtifact",
    "sort_key",
]
