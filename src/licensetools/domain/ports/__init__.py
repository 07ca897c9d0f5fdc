"""Domain port definitions for adapters."""

from __future__ import annotations

from .graph import BuildConfiguration, BuildModule, ProjectGraph
from .manifest import ManifestLoader
from .metadata import (
    LibraryMetadata,
    LibraryMetadataFetcher,
    LicenseEntry,
    MetadataUnavailableError,
)

__all__ = [
    "BuildConfiguration",
    "BuildModule",
    "LibraryMetadata",
    "LibraryMetadataFetcher",
    "LicenseEntry",
    "ManifestLoader",
    "MetadataUnavailableError",
    "ProjectGraph",
]
