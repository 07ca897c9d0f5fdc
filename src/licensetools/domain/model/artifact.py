"""Versioned artifact coordinates.

An ``ArtifactIdentity`` is the ``group:name:version`` triple used both by the build
graph and by the manifest. Manifest entries may carry the wildcard version, which
covers every resolved version of the same ``group:name``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

WILDCARD_VERSION: Final[str] = "+"
UNSPECIFIED_VERSION: Final[str] = "unspecified"

_SEPARATOR: Final[str] = ":"


class MalformedIdentityError(ValueError):
    """Raised when a coordinate does not split into ``group:name:version``."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Malformed artifact coordinate: {text!r}")


@dataclass(frozen=True, slots=True)
class ArtifactIdentity:
    group: str
    name: str
    version: str

    @classmethod
    def parse(cls, text: str) -> ArtifactIdentity:
        segments = text.split(_SEPARATOR)
        if len(segments) != 3 or not all(segments):
            raise MalformedIdentityError(text)
        group, name, version = segments
        return cls(group=group, name=name, version=version)

    @property
    def key(self) -> str:
        """``group:name`` without the version."""
        return f"{self.group}{_SEPARATOR}{self.name}"

    @property
    def is_wildcard(self) -> bool:
        return self.version == WILDCARD_VERSION

    def with_wildcard_version(self) -> ArtifactIdentity:
        return replace(self, version=WILDCARD_VERSION)

    def matches(self, other: ArtifactIdentity) -> bool:
        if self.group != other.group or self.name != other.name:
            return False
        return self.version == other.version or self.is_wildcard or other.is_wildcard

    def __str__(self) -> str:
        return _SEPARATOR.join((self.group, self.name, self.version))
