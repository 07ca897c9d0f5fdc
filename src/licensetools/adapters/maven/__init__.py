"""POM based license metadata adapter."""

from __future__ import annotations

from .client import MavenRepositoryClient, MavenRepositoryError, find_local_pom, pom_path
from .fetcher import MavenMetadataFetcher, build_maven_metadata_fetcher
from .schema import PomDocument, PomLicense
from .translator import PomParseError, parse_pom, translate_pom

__all__ = [
    "MavenMetadataFetcher",
    "MavenRepositoryClient",
    "MavenRepositoryError",
    "PomDocument",
    "PomLicense",
    "PomParseError",
    "build_maven_metadata_fetcher",
    "find_local_pom",
    "parse_pom",
    "pom_path",
    "translate_pom",
]
