"""Three-way diff between resolved libraries and the documented manifest.

Matching is wildcard aware: a manifest entry recorded as ``group:name:+`` covers
every resolved version of ``group:name``. License strings are compared verbatim,
with a missing license treated as the empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from licensetools.domain.model import sort_key

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from licensetools.domain.model import LibraryRecord


def not_listed_in(
    records: Iterable[LibraryRecord],
    others: Iterable[LibraryRecord],
) -> frozenset[LibraryRecord]:
    """Records with no identity match among ``others``."""

    candidates = tuple(others)
    return frozenset(
        record
        for record in records
        if not any(other.same_library(record) for other in candidates)
    )


def licenses_unmatched(
    resolved: Iterable[LibraryRecord],
    documented: Iterable[LibraryRecord],
) -> frozenset[LibraryRecord]:
    """Resolved records whose documented counterpart declares a different license."""

    entries = tuple(documented)
    return frozenset(
        record
        for record in resolved
        if any(
            entry.same_library(record) and not entry.license_matches(record) for entry in entries
        )
    )


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    undocumented: frozenset[LibraryRecord]
    stale_manifest_entries: frozenset[LibraryRecord]
    license_mismatches: frozenset[LibraryRecord]

    @property
    def ok(self) -> bool:
        return not (self.undocumented or self.stale_manifest_entries or self.license_mismatches)

    def sorted_undocumented(self) -> list[LibraryRecord]:
        return sorted(self.undocumented, key=sort_key)

    def sorted_stale_manifest_entries(self) -> list[LibraryRecord]:
        return sorted(self.stale_manifest_entries, key=sort_key)

    def sorted_license_mismatches(self) -> list[LibraryRecord]:
        return sorted(self.license_mismatches, key=sort_key)


class ReconciliationFailure(RuntimeError):
    """Raised once every discrepancy report has been emitted."""

    def __init__(self, manifest_path: Path, result: ReconciliationResult) -> None:
        self.manifest_path = manifest_path
        self.result = result
        super().__init__(f"checkLicenses: missing libraries in {manifest_path}")


def reconcile(
    resolved: Iterable[LibraryRecord],
    documented: Iterable[LibraryRecord],
) -> ReconciliationResult:
    resolved_records = frozenset(resolved)
    documented_records = frozenset(documented)
    return ReconciliationResult(
        undocumented=not_listed_in(resolved_records, documented_records),
        stale_manifest_entries=not_listed_in(documented_records, resolved_records),
        license_mismatches=licenses_unmatched(resolved_records, documented_records),
    )
