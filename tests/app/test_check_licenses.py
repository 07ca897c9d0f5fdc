from __future__ import annotations

from pathlib import Path

import pytest

from licensetools import app as app_module
from licensetools.adapters.gradle import load_graph_snapshot
from licensetools.adapters.manifest import load_manifest
from licensetools.app import check_licenses, list_dependency_licenses
from licensetools.config import AuditConfig
from licensetools.domain.model import ArtifactIdentity, LibraryRecord
from licensetools.domain.ports import (
    LibraryMetadata,
    LicenseEntry,
    ManifestLoader,
    MetadataUnavailableError,
)
from licensetools.domain.reconciliation import ReconciliationFailure

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
APACHE = LicenseEntry(
    name="The Apache Software License, Version 2.0",
    url="https://www.apache.org/licenses/LICENSE-2.0.txt",
)
EPL = LicenseEntry(name="Eclipse Public License - v 2.0")

PUBLISHED = {
    "com.squareup.okhttp3:okhttp:4.12.0": LibraryMetadata(
        licenses=(APACHE,),
        name="okhttp",
        url="https://square.github.io/okhttp/",
    ),
    "com.squareup.okio:okio:3.6.0": LibraryMetadata(licenses=(APACHE,), name="Okio"),
    "org.example:dual-license:1.0": LibraryMetadata(licenses=(EPL,)),
}


def fake_fetcher(identity: ArtifactIdentity) -> LibraryMetadata:
    try:
        return PUBLISHED[str(identity)]
    except KeyError:
        raise MetadataUnavailableError(identity, "not published") from None


def _config(**overrides: frozenset[str]) -> AuditConfig:
    return AuditConfig(
        manifest_path=DATA_DIR / "libraries.yml",
        graph_path=DATA_DIR / "dependency-graph.json",
        **overrides,
    )


def _manifest(*records: LibraryRecord) -> ManifestLoader:
    def loader(_path: Path) -> tuple[LibraryRecord, ...]:
        return records

    return loader


def test_documented_project_passes(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO")

    report = check_licenses(_config(), metadata_fetcher=fake_fetcher)

    assert report.ok
    assert report.sections == ()
    assert report.resolved_count == 3
    assert report.documented_count == 3
    assert "checkLicenses: ok" in caplog.text


def test_failure_reports_every_section_before_raising(caplog: pytest.LogCaptureFixture) -> None:
    stale = LibraryRecord(
        identity=ArtifactIdentity.parse("com.google.code.gson:gson:+"),
        display_name="gson",
        license="The Apache Software License, Version 2.0",
    )
    mismatched = LibraryRecord(
        identity=ArtifactIdentity.parse("com.squareup.okio:okio:+"),
        display_name="okio",
        license="MIT",
    )

    with pytest.raises(ReconciliationFailure) as exc:
        check_licenses(
            _config(),
            metadata_fetcher=fake_fetcher,
            manifest_loader=_manifest(stale, mismatched),
        )

    result = exc.value.result
    assert {str(r.identity) for r in result.undocumented} == {
        "com.squareup.okhttp3:okhttp:4.12.0",
        "org.example:dual-license:1.0",
    }
    assert {str(r.identity) for r in result.stale_manifest_entries} == {
        "com.google.code.gson:gson:+"
    }
    assert {str(r.identity) for r in result.license_mismatches} == {
        "com.squareup.okio:okio:3.6.0"
    }
    assert "missing libraries in" in str(exc.value)
    assert "# Libraries not listed in" in caplog.text
    assert "- artifact: com.squareup.okhttp3:okhttp:+" in caplog.text
    assert "but not in dependencies:" in caplog.text
    assert "# Licenses not matched with pom.xml in dependencies:" in caplog.text


def test_ignored_modules_and_groups_narrow_the_audit() -> None:
    graph = load_graph_snapshot(DATA_DIR / "dependency-graph.json")
    okhttp_only = load_manifest(DATA_DIR / "libraries.yml")[:1]

    report = check_licenses(
        _config(
            ignored_modules=frozenset({"sample"}),
            ignored_groups=frozenset({"com.squareup.okio"}),
        ),
        graph=graph,
        metadata_fetcher=fake_fetcher,
        manifest_loader=_manifest(*okhttp_only),
    )

    assert report.ok
    assert report.resolved_count == 1


def test_unavailable_metadata_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    def failing_fetcher(identity: ArtifactIdentity) -> LibraryMetadata:
        raise MetadataUnavailableError(identity, "offline")

    report = check_licenses(
        _config(),
        metadata_fetcher=failing_fetcher,
        manifest_loader=_manifest(),
    )

    assert report.ok
    assert report.resolved_count == 0
    assert "Unable to retrieve license for com.squareup.okio:okio:3.6.0: offline" in caplog.text


def test_list_dependency_licenses_renders_sorted_entries() -> None:
    entries = list_dependency_licenses(
        _config(ignored_modules=frozenset({"sample"})),
        metadata_fetcher=fake_fetcher,
    )

    assert [entry.splitlines()[0] for entry in entries] == [
        "- artifact: com.squareup.okhttp3:okhttp:+",
        "- artifact: com.squareup.okio:okio:+",
    ]
    assert entries[0].endswith("  url: https://square.github.io/okhttp/")


class RecordingFetcher:
    def __init__(self) -> None:
        self.calls: list[ArtifactIdentity] = []
        self.closed = False

    def __enter__(self) -> RecordingFetcher:
        return self

    def __exit__(self, *_: object) -> None:
        self.closed = True

    def __call__(self, identity: ArtifactIdentity) -> LibraryMetadata:
        assert not self.closed
        self.calls.append(identity)
        return fake_fetcher(identity)


def test_default_fetcher_is_shared_and_closed(monkeypatch: pytest.MonkeyPatch) -> None:
    built: list[RecordingFetcher] = []

    def build_fetcher() -> RecordingFetcher:
        fetcher = RecordingFetcher()
        built.append(fetcher)
        return fetcher

    monkeypatch.setattr(app_module, "build_maven_metadata_fetcher", build_fetcher)

    report = check_licenses(_config())

    assert report.ok
    assert len(built) == 1
    assert len(built[0].calls) == 3
    assert built[0].closed
