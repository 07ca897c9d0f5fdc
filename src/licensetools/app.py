"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from licensetools.adapters.gradle import load_graph_snapshot
from licensetools.adapters.manifest import load_manifest
from licensetools.adapters.maven import build_maven_metadata_fetcher
from licensetools.domain.model import sort_key
from licensetools.domain.reconciliation import (
    ReconciliationFailure,
    ReconciliationResult,
    reconcile,
)
from licensetools.domain.report import ReportSection, build_sections, render_manifest_entry
from licensetools.domain.resolution import load_dependency_licenses, resolve_project_dependencies

if TYPE_CHECKING:
    from collections.abc import Collection

    from licensetools.config import AuditConfig
    from licensetools.domain.model import LibraryRecord
    from licensetools.domain.ports import LibraryMetadataFetcher, ManifestLoader, ProjectGraph


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuditReport:
    result: ReconciliationResult
    sections: tuple[ReportSection, ...]
    resolved_count: int
    documented_count: int

    @property
    def ok(self) -> bool:
        return self.result.ok

    def render(self) -> str:
        return "\n\n".join(section.render() for section in self.sections)


def resolve_dependency_licenses(
    config: AuditConfig,
    *,
    graph: ProjectGraph | None = None,
    metadata_fetcher: LibraryMetadataFetcher | None = None,
    roots: Collection[str] | None = None,
) -> frozenset[LibraryRecord]:
    """Resolve the project's external libraries and their published licenses."""

    project_graph = graph if graph is not None else load_graph_snapshot(config.graph_path)
    artifacts = resolve_project_dependencies(
        project_graph,
        ignored_modules=config.ignored_modules,
        roots=roots,
    )
    if metadata_fetcher is not None:
        return load_dependency_licenses(
            artifacts,
            fetch_metadata=metadata_fetcher,
            ignored_groups=config.ignored_groups,
        )
    with build_maven_metadata_fetcher() as fetcher:
        return load_dependency_licenses(
            artifacts,
            fetch_metadata=fetcher,
            ignored_groups=config.ignored_groups,
        )


def check_licenses(
    config: AuditConfig,
    *,
    graph: ProjectGraph | None = None,
    metadata_fetcher: LibraryMetadataFetcher | None = None,
    manifest_loader: ManifestLoader | None = None,
    roots: Collection[str] | None = None,
) -> AuditReport:
    """Compare resolved dependencies with the manifest.

    Every non-empty discrepancy section is logged before ``ReconciliationFailure`` is
    raised, so one run reports all problems at once.
    """

    resolved = resolve_dependency_licenses(
        config,
        graph=graph,
        metadata_fetcher=metadata_fetcher,
        roots=roots,
    )
    documented = (manifest_loader or load_manifest)(config.manifest_path)
    result = reconcile(resolved, documented)
    report = AuditReport(
        result=result,
        sections=tuple(build_sections(result, manifest_path=config.manifest_path)),
        resolved_count=len(resolved),
        documented_count=len(documented),
    )

    if report.ok:
        log.info("checkLicenses: ok")
        return report

    for section in report.sections:
        log.warning(section.render())
    raise ReconciliationFailure(config.manifest_path, result)


def list_dependency_licenses(
    config: AuditConfig,
    *,
    graph: ProjectGraph | None = None,
    metadata_fetcher: LibraryMetadataFetcher | None = None,
    roots: Collection[str] | None = None,
) -> list[str]:
    """Manifest entries for every resolved library, ready to seed a new manifest."""

    resolved = resolve_dependency_licenses(
        config,
        graph=graph,
        metadata_fetcher=metadata_fetcher,
        roots=roots,
    )
    return [render_manifest_entry(record) for record in sorted(resolved, key=sort_key)]
