"""Turn resolved artifacts into library records using published license metadata."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from licensetools.domain.model import ArtifactIdentity, LibraryRecord, MalformedIdentityError
from licensetools.domain.ports import MetadataUnavailableError

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from licensetools.domain.model import ResolvedArtifact
    from licensetools.domain.ports import LibraryMetadataFetcher

log = getLogger(__name__)


def resolved_artifact_to_record(
    artifact: ResolvedArtifact,
    *,
    fetch_metadata: LibraryMetadataFetcher,
) -> LibraryRecord | None:
    """Build a record for ``artifact`` or return ``None`` when it has to be skipped."""

    try:
        identity = ArtifactIdentity.parse(artifact.coordinate)
    except MalformedIdentityError:
        log.info("Unsupported dependency: %s", artifact.coordinate)
        return None

    try:
        metadata = fetch_metadata(identity)
    except MetadataUnavailableError as exc:
        log.warning("Unable to retrieve license for %s: %s", identity, exc.reason)
        return None

    primary = metadata.primary_license
    return LibraryRecord(
        identity=identity,
        display_name=artifact.name,
        library_name=metadata.name,
        url=metadata.url,
        file_name=artifact.file_name,
        license=(primary.name if primary else None) or "",
        license_url=primary.url if primary else None,
    )


def load_dependency_licenses(
    artifacts: Iterable[ResolvedArtifact],
    *,
    fetch_metadata: LibraryMetadataFetcher,
    ignored_groups: Collection[str] = frozenset(),
) -> frozenset[LibraryRecord]:
    records: set[LibraryRecord] = set()
    for artifact in artifacts:
        if artifact.is_unspecified:
            log.info("Skipping %s: no published version", artifact.coordinate)
            continue
        if artifact.group in ignored_groups:
            log.info("Skipping %s: group %s is ignored", artifact.coordinate, artifact.group)
            continue
        record = resolved_artifact_to_record(artifact, fetch_metadata=fetch_metadata)
        if record is not None:
            records.add(record)
    return frozenset(records)
