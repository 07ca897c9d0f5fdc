"""Locate and download POM documents from Maven repositories."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from licensetools.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path
    from types import TracebackType

    from licensetools.config.http_resilience import ResilienceConfig
    from licensetools.config.maven import MavenConfig
    from licensetools.domain.model import ArtifactIdentity

log = getLogger(__name__)


class MavenRepositoryError(RuntimeError):
    """Raised when no repository can serve the requested POM."""


def pom_file_name(identity: ArtifactIdentity) -> str:
    return f"{identity.name}-{identity.version}.pom"


def pom_path(identity: ArtifactIdentity) -> str:
    """Repository-relative path of the POM in the standard Maven layout."""

    group_path = identity.group.replace(".", "/")
    return f"{group_path}/{identity.name}/{identity.version}/{pom_file_name(identity)}"


def find_local_pom(identity: ArtifactIdentity, repositories: Iterable[Path]) -> Path | None:
    """Search Maven-layout and Gradle-cache-layout directories for the POM."""

    file_name = pom_file_name(identity)
    for repository in repositories:
        maven_candidate = repository / pom_path(identity)
        if maven_candidate.is_file():
            return maven_candidate
        gradle_dir = repository / identity.group / identity.name / identity.version
        if gradle_dir.is_dir():
            for candidate in sorted(gradle_dir.glob(f"*/{file_name}")):
                if candidate.is_file():
                    return candidate
    return None


class MavenRepositoryClient:
    """Fetch POM documents over HTTP, trying repositories in order.

    The HTTP client and its event loop are created on the first request and reused
    until ``close``, so rate limiting and response caching span every lookup of a run.
    """

    def __init__(
        self,
        *,
        config: MavenConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient
        self._runner: asyncio.Runner | None = None
        self._client: ResilientClient | None = None

    def __enter__(self) -> MavenRepositoryClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def fetch_pom(self, identity: ArtifactIdentity) -> bytes:
        if not self._config.repositories:
            raise MavenRepositoryError("No Maven repositories configured")
        if self._runner is None:
            self._runner = asyncio.Runner()
        return self._runner.run(self._fetch_pom_async(identity))

    def close(self) -> None:
        if self._runner is None:
            return
        try:
            if self._client is not None:
                self._runner.run(self._client.aclose())
        finally:
            self._client = None
            self._runner.close()
            self._runner = None

    async def _fetch_pom_async(self, identity: ArtifactIdentity) -> bytes:
        if self._client is None:
            self._client = self._client_factory(self._resilience)
        client = self._client

        path = pom_path(identity)
        failures: list[str] = []
        for repository in self._config.repositories:
            url = f"{repository}/{path}"
            try:
                response = await client.get(url)
            except httpx.HTTPError as exc:
                failures.append(f"{repository}: {exc}")
                continue
            if response.status_code == httpx.codes.NOT_FOUND:
                failures.append(f"{repository}: not found")
                continue
            if response.is_error:
                failures.append(f"{repository}: HTTP {response.status_code}")
                continue
            log.debug("POM: %s", url)
            return response.content

        raise MavenRepositoryError("; ".join(failures))
