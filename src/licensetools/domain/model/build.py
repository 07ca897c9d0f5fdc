"""Build graph value types consumed by dependency resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .artifact import UNSPECIFIED_VERSION


class ArtifactKind(StrEnum):
    EXTERNAL = "external"
    MODULE = "module"


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedArtifact:
    """One artifact resolved from a module configuration."""

    group: str
    name: str
    version: str
    file_name: str | None = None
    kind: ArtifactKind = ArtifactKind.EXTERNAL

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    @property
    def is_unspecified(self) -> bool:
        return self.version == UNSPECIFIED_VERSION

    @property
    def is_module_reference(self) -> bool:
        return self.kind is ArtifactKind.MODULE
