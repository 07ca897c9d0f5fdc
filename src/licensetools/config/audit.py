"""Audit scope configuration: manifest, build graph and ignore lists."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from .env import env_list, env_str
from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_MANIFEST_PATH: Final[str] = "libraries.yml"
DEFAULT_GRAPH_PATH: Final[str] = "build/licensetools/dependency-graph.json"

MANIFEST_ENV: Final[str] = "LICENSETOOLS_MANIFEST"
GRAPH_ENV: Final[str] = "LICENSETOOLS_GRAPH"
IGNORED_MODULES_ENV: Final[str] = "LICENSETOOLS_IGNORED_MODULES"
IGNORED_GROUPS_ENV: Final[str] = "LICENSETOOLS_IGNORED_GROUPS"


@dataclass(frozen=True, slots=True)
class AuditConfig:
    manifest_path: Path
    graph_path: Path
    ignored_modules: frozenset[str] = frozenset()
    ignored_groups: frozenset[str] = frozenset()

    def require_files(self, *, manifest: bool = True) -> None:
        """Raise if the build graph snapshot (and, by default, the manifest) is missing."""

        required = (self.graph_path, self.manifest_path) if manifest else (self.graph_path,)
        missing = [str(path) for path in required if not path.is_file()]
        if missing:
            raise MissingConfigurationError(f"Missing input files: {', '.join(missing)}")


def get_audit_config(
    *,
    manifest_path: Path | str | None = None,
    graph_path: Path | str | None = None,
    ignored_modules: Iterable[str] = (),
    ignored_groups: Iterable[str] = (),
) -> AuditConfig:
    """Build the audit configuration; explicit arguments override the environment.

    Ignore lists are merged: values from the environment plus the ones passed in.
    """

    manifest = manifest_path or env_str(MANIFEST_ENV, DEFAULT_MANIFEST_PATH)
    graph = graph_path or env_str(GRAPH_ENV, DEFAULT_GRAPH_PATH)
    return AuditConfig(
        manifest_path=Path(manifest),
        graph_path=Path(graph),
        ignored_modules=frozenset((*env_list(IGNORED_MODULES_ENV), *ignored_modules)),
        ignored_groups=frozenset((*env_list(IGNORED_GROUPS_ENV), *ignored_groups)),
    )
