"""YAML library manifest adapter."""

from __future__ import annotations

from .loader import ManifestFormatError, entry_to_record, load_manifest, parse_manifest
from .schema import ManifestEntry

__all__ = [
    "ManifestEntry",
    "ManifestFormatError",
    "entry_to_record",
    "load_manifest",
    "parse_manifest",
]
