"""License metadata lookups backed by POM documents."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from licensetools.config.maven import get_maven_config
from licensetools.domain.ports import MetadataUnavailableError

from .client import MavenRepositoryClient, MavenRepositoryError, find_local_pom
from .translator import PomParseError, parse_pom, translate_pom

if TYPE_CHECKING:
    from types import TracebackType

    from licensetools.config.maven import MavenConfig
    from licensetools.domain.model import ArtifactIdentity
    from licensetools.domain.ports import LibraryMetadata

log = getLogger(__name__)


class PomSource(Protocol):
    def fetch_pom(self, identity: ArtifactIdentity) -> bytes: ...

    def close(self) -> None: ...


class MavenMetadataFetcher:
    """``LibraryMetadataFetcher`` reading local repositories before remote ones.

    Use it as a context manager around one audit run so the remote client is shared
    by every lookup and closed afterwards.
    """

    def __init__(self, *, config: MavenConfig, client: PomSource | None = None) -> None:
        self._config = config
        self._client = client or MavenRepositoryClient(config=config)

    def __enter__(self) -> MavenMetadataFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def __call__(self, identity: ArtifactIdentity) -> LibraryMetadata:
        content = self._read_pom(identity)
        try:
            document = parse_pom(content)
        except PomParseError as exc:
            raise MetadataUnavailableError(identity, str(exc)) from exc
        return translate_pom(document)

    def _read_pom(self, identity: ArtifactIdentity) -> bytes:
        local = find_local_pom(identity, self._config.local_repositories)
        if local is not None:
            log.debug("POM: %s", local)
            try:
                return local.read_bytes()
            except OSError as exc:
                log.info("Cannot read %s, trying remote repositories: %s", local, exc)
        try:
            return self._client.fetch_pom(identity)
        except MavenRepositoryError as exc:
            raise MetadataUnavailableError(identity, str(exc)) from exc


def build_maven_metadata_fetcher(config: MavenConfig | None = None) -> MavenMetadataFetcher:
    return MavenMetadataFetcher(config=config or get_maven_config())
