"""Dependency resolution: build graph walk and artifact-to-record conversion."""

from __future__ import annotations

from .records import load_dependency_licenses, resolved_artifact_to_record
from .walker import (
    DependencyGraphWalker,
    ModuleIndex,
    is_dependency_scope,
    resolve_project_dependencies,
    target_modules,
)

__all__ = [
    "DependencyGraphWalker",
    "ModuleIndex",
    "is_dependency_scope",
    "load_dependency_licenses",
    "resolve_project_dependencies",
    "resolved_artifact_to_record",
    "target_modules",
]
