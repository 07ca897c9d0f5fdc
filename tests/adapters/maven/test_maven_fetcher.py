from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from licensetools.adapters.maven import MavenMetadataFetcher, MavenRepositoryError, pom_path
from licensetools.config import MavenConfig, ResilienceConfig
from licensetools.domain.model import ArtifactIdentity
from licensetools.domain.ports import LibraryMetadataFetcher, MetadataUnavailableError

POM_DIR = Path(__file__).resolve().parents[2] / "data" / "poms"
IDENTITY = ArtifactIdentity("com.squareup.okhttp3", "okhttp", "4.12.0")


@dataclass
class FakePomSource:
    content: bytes | None = None
    requested: list[ArtifactIdentity] = field(default_factory=list[ArtifactIdentity])
    closed: bool = False

    def fetch_pom(self, identity: ArtifactIdentity) -> bytes:
        self.requested.append(identity)
        if self.content is None:
            raise MavenRepositoryError("https://repo.example: not found")
        return self.content

    def close(self) -> None:
        self.closed = True


def _config(*local_repositories: Path) -> MavenConfig:
    return MavenConfig(
        repositories=("https://repo.example",),
        local_repositories=local_repositories,
        resilience=ResilienceConfig(name="maven-test", cache=None),
    )


def test_fetcher_satisfies_port() -> None:
    fetcher = MavenMetadataFetcher(config=_config(), client=FakePomSource())

    assert isinstance(fetcher, LibraryMetadataFetcher)


def test_local_pom_is_preferred(tmp_path: Path) -> None:
    pom = tmp_path / pom_path(IDENTITY)
    pom.parent.mkdir(parents=True)
    pom.write_bytes((POM_DIR / "okhttp-4.12.0.pom").read_bytes())
    remote = FakePomSource(content=b"<project><name>remote</name></project>")

    metadata = MavenMetadataFetcher(config=_config(tmp_path), client=remote)(IDENTITY)

    assert metadata.name == "okhttp"
    assert metadata.primary_license is not None
    assert metadata.primary_license.name == "The Apache Software License, Version 2.0"
    assert remote.requested == []


def test_remote_pom_when_not_cached_locally(tmp_path: Path) -> None:
    remote = FakePomSource(content=(POM_DIR / "okhttp-4.12.0.pom").read_bytes())

    metadata = MavenMetadataFetcher(config=_config(tmp_path), client=remote)(IDENTITY)

    assert metadata.url == "https://square.github.io/okhttp/"
    assert remote.requested == [IDENTITY]


def test_repository_failure_becomes_metadata_unavailable() -> None:
    fetcher = MavenMetadataFetcher(config=_config(), client=FakePomSource())

    with pytest.raises(MetadataUnavailableError) as exc:
        fetcher(IDENTITY)

    assert exc.value.identity == IDENTITY
    assert "not found" in exc.value.reason


def test_unreadable_pom_becomes_metadata_unavailable() -> None:
    fetcher = MavenMetadataFetcher(
        config=_config(),
        client=FakePomSource(content=b"<html>Service unavailable</html>"),
    )

    with pytest.raises(MetadataUnavailableError, match="Unexpected POM root element"):
        fetcher(IDENTITY)


def test_context_closes_the_remote_source(tmp_path: Path) -> None:
    remote = FakePomSource(content=(POM_DIR / "okhttp-4.12.0.pom").read_bytes())

    with MavenMetadataFetcher(config=_config(tmp_path), client=remote) as fetcher:
        fetcher(IDENTITY)
        fetcher(IDENTITY)
        assert not remote.closed

    assert remote.closed
    assert remote.requested == [IDENTITY, IDENTITY]
