"""Load the library manifest into domain records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from licensetools.domain.model import ArtifactIdentity, LibraryRecord, MalformedIdentityError

from .schema import ManifestEntry

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


class ManifestFormatError(ValueError):
    """Raised when the manifest is not a list of well-formed library entries."""

    def __init__(self, path: Path, reason: str, *, index: int | None = None) -> None:
        self.path = path
        self.reason = reason
        self.index = index
        location = str(path) if index is None else f"{path} entry #{index + 1}"
        super().__init__(f"{location}: {reason}")


def entry_to_record(entry: ManifestEntry) -> LibraryRecord:
    return LibraryRecord(
        identity=ArtifactIdentity.parse(entry.artifact.strip()),
        display_name=entry.name,
        library_name=entry.library_name,
        url=entry.url,
        file_name=entry.file_name,
        license=entry.license,
        license_url=entry.license_url,
        copyright_holder=entry.copyright_holder,
        notice=entry.notice,
    )


def parse_manifest(text: str, *, path: Path) -> tuple[LibraryRecord, ...]:
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestFormatError(path, f"invalid YAML: {exc}") from exc

    if document is None:
        return ()
    if not isinstance(document, list):
        raise ManifestFormatError(path, "expected a list of library entries")

    records: list[LibraryRecord] = []
    for index, raw in enumerate(document):
        if not isinstance(raw, dict):
            raise ManifestFormatError(path, "expected a mapping", index=index)
        try:
            entry = ManifestEntry.model_validate(raw)
            records.append(entry_to_record(entry))
        except ValidationError as exc:
            raise ManifestFormatError(path, str(exc), index=index) from exc
        except MalformedIdentityError as exc:
            raise ManifestFormatError(path, str(exc), index=index) from exc
    return tuple(records)


def load_manifest(path: Path) -> tuple[LibraryRecord, ...]:
    """``ManifestLoader`` reading a YAML manifest from disk."""

    records = parse_manifest(path.read_text(encoding="utf-8"), path=path)
    log.info("Loaded %s manifest entries from %s", len(records), path)
    return records
