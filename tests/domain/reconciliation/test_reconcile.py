from __future__ import annotations

from pathlib import Path

import pytest

from licensetools.domain.model import ArtifactIdentity, LibraryRecord
from licensetools.domain.reconciliation import (
    ReconciliationFailure,
    licenses_unmatched,
    not_listed_in,
    reconcile,
)


def _record(coordinate: str, license: str | None = "MIT") -> LibraryRecord:  # noqa: A002
    identity = ArtifactIdentity.parse(coordinate)
    return LibraryRecord(identity=identity, display_name=identity.name, license=license)


def _ids(records: frozenset[LibraryRecord]) -> set[str]:
    return {str(record.identity) for record in records}


def test_wildcard_entry_with_same_license_passes() -> None:
    result = reconcile({_record("A:B:1.0")}, {_record("A:B:+")})

    assert result.ok
    assert not result.undocumented
    assert not result.stale_manifest_entries
    assert not result.license_mismatches


def test_license_mismatch_is_reported_against_resolved_record() -> None:
    result = reconcile({_record("A:B:1.0", "MIT")}, {_record("A:B:+", "Apache-2.0")})

    assert _ids(result.license_mismatches) == {"A:B:1.0"}
    assert not result.undocumented
    assert not result.stale_manifest_entries
    assert not result.ok


def test_resolved_library_missing_from_manifest_is_undocumented() -> None:
    result = reconcile({_record("A:B:1.0")}, set())

    assert _ids(result.undocumented) == {"A:B:1.0"}
    assert not result.stale_manifest_entries
    assert not result.license_mismatches


def test_manifest_entry_without_dependency_is_stale() -> None:
    result = reconcile(set(), {_record("A:B:1.0")})

    assert _ids(result.stale_manifest_entries) == {"A:B:1.0"}
    assert not result.undocumented
    assert not result.license_mismatches


def test_concrete_manifest_version_only_covers_that_version() -> None:
    result = reconcile({_record("A:B:2.0")}, {_record("A:B:1.0")})

    assert _ids(result.undocumented) == {"A:B:2.0"}
    assert _ids(result.stale_manifest_entries) == {"A:B:1.0"}
    assert not result.license_mismatches


def test_one_wildcard_entry_covers_several_versions() -> None:
    result = reconcile({_record("A:B:1.0"), _record("A:B:2.0")}, {_record("A:B:+")})

    assert result.ok


def test_missing_license_equals_empty_license() -> None:
    result = reconcile({_record("A:B:1.0", "")}, {_record("A:B:+", None)})

    assert result.ok


def test_license_strings_are_compared_verbatim() -> None:
    mismatches = licenses_unmatched({_record("A:B:1.0", "MIT")}, {_record("A:B:+", "mit")})

    assert _ids(mismatches) == {"A:B:1.0"}


def test_undocumented_and_mismatched_are_disjoint() -> None:
    resolved = {_record("A:B:1.0", "MIT"), _record("C:D:1.0"), _record("E:F:3.1")}
    documented = {_record("A:B:+", "Apache-2.0"), _record("E:F:+"), _record("G:H:+")}

    result = reconcile(resolved, documented)

    assert _ids(result.undocumented) == {"C:D:1.0"}
    assert _ids(result.stale_manifest_entries) == {"G:H:+"}
    assert _ids(result.license_mismatches) == {"A:B:1.0"}
    assert not result.undocumented & result.license_mismatches


def test_not_listed_in_accepts_one_shot_iterables() -> None:
    missing = not_listed_in([_record("A:B:1.0")], iter([_record("X:Y:+"), _record("A:B:+")]))

    assert missing == frozenset()


def test_sorted_helpers_order_by_coordinate() -> None:
    result = reconcile({_record("b:z:1.0"), _record("a:y:2.0"), _record("a:y:1.0")}, set())

    assert [str(r.identity) for r in result.sorted_undocumented()] == [
        "a:y:1.0",
        "a:y:2.0",
        "b:z:1.0",
    ]


def test_failure_names_manifest_and_keeps_result() -> None:
    result = reconcile({_record("A:B:1.0")}, set())

    with pytest.raises(ReconciliationFailure, match="missing libraries in libraries.yml") as exc:
        raise ReconciliationFailure(Path("libraries.yml"), result)

    assert exc.value.result is result
    assert exc.value.manifest_path == Path("libraries.yml")
