"""Port for loading the hand-maintained library manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from licensetools.domain.model import LibraryRecord


@runtime_checkable
class ManifestLoader(Protocol):
    def __call__(self, path: Path) -> tuple[LibraryRecord, ...]: ...


__all__ = ["ManifestLoader"]
