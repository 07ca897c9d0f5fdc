"""Ports for querying a multi-module build graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from licensetools.domain.model import ResolvedArtifact


class BuildConfiguration(Protocol):
    """Named dependency bucket of a module."""

    @property
    def name(self) -> str: ...

    def resolved_artifacts(self) -> Iterable[ResolvedArtifact]: ...


class BuildModule(Protocol):
    """One buildable unit of the project."""

    @property
    def name(self) -> str: ...

    @property
    def coordinate(self) -> str:
        """The ``group:name:version`` other modules resolve this module as."""
        ...

    def configurations(self) -> Iterable[BuildConfiguration]: ...


@runtime_checkable
class ProjectGraph(Protocol):
    """Read-only access to every module of a project."""

    def modules(self) -> Sequence[BuildModule]: ...


__all__ = ["BuildConfiguration", "BuildModule", "ProjectGraph"]
