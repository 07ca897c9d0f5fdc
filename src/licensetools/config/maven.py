"""Maven repository configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from licensetools import __version__

from .env import env_list
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

MAVEN_CENTRAL_URL: Final[str] = "https://repo.maven.apache.org/maven2"
GOOGLE_MAVEN_URL: Final[str] = "https://dl.google.com/dl/android/maven2"
DEFAULT_REPOSITORIES: Final[tuple[str, ...]] = (MAVEN_CENTRAL_URL, GOOGLE_MAVEN_URL)

REPOSITORIES_ENV: Final[str] = "LICENSETOOLS_MAVEN_REPOSITORIES"
LOCAL_REPOSITORIES_ENV: Final[str] = "LICENSETOOLS_LOCAL_REPOSITORIES"

MAVEN_TIMEOUT_SECONDS = 15.0


def default_local_repositories() -> tuple[Path, ...]:
    home = Path.home()
    return (
        home / ".m2" / "repository",
        home / ".gradle" / "caches" / "modules-2" / "files-2.1",
    )


@dataclass(frozen=True, slots=True)
class MavenConfig:
    """Where POM documents are looked up, local directories first."""

    repositories: tuple[str, ...]
    local_repositories: tuple[Path, ...]
    resilience: ResilienceConfig


def get_maven_config(*, resilience: ResilienceConfig | None = None) -> MavenConfig:
    repositories = tuple(
        url.rstrip("/") for url in env_list(REPOSITORIES_ENV, DEFAULT_REPOSITORIES)
    )
    local_values = env_list(LOCAL_REPOSITORIES_ENV)
    local_repositories = (
        tuple(Path(value).expanduser() for value in local_values)
        if local_values
        else default_local_repositories()
    )
    return MavenConfig(
        repositories=repositories,
        local_repositories=local_repositories,
        resilience=resilience
        or ResilienceConfig(
            name="maven",
            timeout_seconds=MAVEN_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=8, per_seconds=1.0),
            retry=RetryPolicy(total=3),
            cache=CacheConfig(),
            default_headers={"User-Agent": f"licensetools/{__version__}"},
        ),
    )
