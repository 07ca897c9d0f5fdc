"""``ProjectGraph`` backed by a JSON dependency graph snapshot.

The snapshot lists every module of the build with its configurations and the
artifacts each configuration resolved to::

    {"modules": [{"name": "app", "group": "com.example", "version": "1.0",
                  "configurations": [{"name": "implementation",
                                      "artifacts": [{"group": "com.squareup.okio",
                                                     "name": "okio",
                                                     "version": "3.6.0",
                                                     "file": "okio-3.6.0.jar"}]}]}]}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from licensetools.domain.model import ResolvedArtifact

from .schema import GraphSnapshot

if TYPE_CHECKING:
    from pathlib import Path

    from .schema import ArtifactPayload, ConfigurationPayload, ModulePayload

log = getLogger(__name__)


class GraphSnapshotError(ValueError):
    """Raised when the snapshot file cannot be read as a dependency graph."""


def _to_artifact(payload: ArtifactPayload) -> ResolvedArtifact:
    return ResolvedArtifact(
        group=payload.group,
        name=payload.name,
        version=payload.version,
        file_name=payload.file,
    )


@dataclass(frozen=True, slots=True)
class SnapshotConfiguration:
    name: str
    artifacts: tuple[ResolvedArtifact, ...]

    def resolved_artifacts(self) -> tuple[ResolvedArtifact, ...]:
        return self.artifacts


@dataclass(frozen=True, slots=True)
class SnapshotModule:
    name: str
    group: str
    version: str
    configuration_list: tuple[SnapshotConfiguration, ...]

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    def configurations(self) -> tuple[SnapshotConfiguration, ...]:
        return self.configuration_list


def _to_configuration(payload: ConfigurationPayload) -> SnapshotConfiguration:
    return SnapshotConfiguration(
        name=payload.name,
        artifacts=tuple(_to_artifact(artifact) for artifact in payload.artifacts),
    )


def _to_module(payload: ModulePayload) -> SnapshotModule:
    return SnapshotModule(
        name=payload.name,
        group=payload.group,
        version=payload.version,
        configuration_list=tuple(_to_configuration(c) for c in payload.configurations),
    )


@dataclass(frozen=True, slots=True)
class SnapshotProjectGraph:
    module_list: tuple[SnapshotModule, ...]

    def modules(self) -> tuple[SnapshotModule, ...]:
        return self.module_list

    @classmethod
    def from_snapshot(cls, snapshot: GraphSnapshot) -> SnapshotProjectGraph:
        return cls(module_list=tuple(_to_module(module) for module in snapshot.modules))


def parse_graph_snapshot(text: str) -> SnapshotProjectGraph:
    try:
        snapshot = GraphSnapshot.model_validate(json.loads(text))
    except json.JSONDecodeError as exc:
        raise GraphSnapshotError(f"Invalid dependency graph JSON: {exc}") from exc
    except ValidationError as exc:
        raise GraphSnapshotError(f"Invalid dependency graph snapshot: {exc}") from exc
    return SnapshotProjectGraph.from_snapshot(snapshot)


def load_graph_snapshot(path: Path) -> SnapshotProjectGraph:
    graph = parse_graph_snapshot(path.read_text(encoding="utf-8"))
    log.info("Loaded %s modules from %s", len(graph.module_list), path)
    return graph
