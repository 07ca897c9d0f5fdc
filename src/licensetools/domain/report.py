"""Render audit results in the manifest's record syntax."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from licensetools.domain.model import LibraryRecord
    from licensetools.domain.reconciliation import ReconciliationResult


def _yaml_scalar(value: str | None) -> str:
    return "null" if value is None else value


def render_manifest_entry(record: LibraryRecord) -> str:
    """Manifest entry a maintainer can paste to document ``record``."""

    lines = [
        f"- artifact: {record.identity.with_wildcard_version()}",
        f"  name: {_yaml_scalar(record.display_name)}",
        f"  copyrightHolder: {_yaml_scalar(record.copyright_holder)}",
        f"  license: {_yaml_scalar(record.license)}",
    ]
    if record.license_url and record.license_url.strip():
        lines.append(f"  licenseUrl: {record.license_url}")
    if record.url and record.url.strip():
        lines.append(f"  url: {record.url}")
    return "\n".join(lines).strip()


def render_stale_entry(record: LibraryRecord) -> str:
    return f"- artifact: {record.identity}\n"


def render_license_mismatch(record: LibraryRecord) -> str:
    return f"- artifact: {record.identity}\n  license: {_yaml_scalar(record.license)}"


@dataclass(frozen=True, slots=True)
class ReportSection:
    title: str
    entries: tuple[str, ...]

    def render(self) -> str:
        return "\n".join((self.title, *self.entries))


def build_sections(result: ReconciliationResult, *, manifest_path: Path) -> list[ReportSection]:
    """Non-empty report sections in emission order."""

    sections: list[ReportSection] = []
    if result.undocumented:
        sections.append(
            ReportSection(
                title=f"# Libraries not listed in {manifest_path}:",
                entries=tuple(render_manifest_entry(r) for r in result.sorted_undocumented()),
            )
        )
    if result.stale_manifest_entries:
        sections.append(
            ReportSection(
                title=f"# Libraries listed in {manifest_path} but not in dependencies:",
                entries=tuple(
                    render_stale_entry(r) for r in result.sorted_stale_manifest_entries()
                ),
            )
        )
    if result.license_mismatches:
        sections.append(
            ReportSection(
                title="# Licenses not matched with pom.xml in dependencies:",
                entries=tuple(
                    render_license_mismatch(r) for r in result.sorted_license_mismatches()
                ),
            )
        )
    return sections
