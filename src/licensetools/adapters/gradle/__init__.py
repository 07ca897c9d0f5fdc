"""Gradle dependency graph snapshot adapter."""

from __future__ import annotations

from .schema import GraphSnapshot
from .snapshot import (
    GraphSnapshotError,
    SnapshotConfiguration,
    SnapshotModule,
    SnapshotProjectGraph,
    load_graph_snapshot,
    parse_graph_snapshot,
)

__all__ = [
    "GraphSnapshot",
    "GraphSnapshotError",
    "SnapshotConfiguration",
    "SnapshotModule",
    "SnapshotProjectGraph",
    "load_graph_snapshot",
    "parse_graph_snapshot",
]
