from __future__ import annotations

from pathlib import Path

import pytest

from licensetools.config import ResilienceConfig, get_maven_config
from licensetools.config.maven import (
    DEFAULT_REPOSITORIES,
    LOCAL_REPOSITORIES_ENV,
    REPOSITORIES_ENV,
    default_local_repositories,
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.delenv(REPOSITORIES_ENV, raising=False)
    monkeypatch.delenv(LOCAL_REPOSITORIES_ENV, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = get_maven_config()

    assert config.repositories == DEFAULT_REPOSITORIES
    assert config.local_repositories == default_local_repositories()
    assert config.resilience.name == "maven"
    assert config.resilience.ratelimit is not None
    assert config.resilience.cache is not None
    assert config.resilience.default_headers is not None
    assert config.resilience.default_headers["User-Agent"].startswith("licensetools/")


def test_environment_repositories(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv(REPOSITORIES_ENV, "https://mirror.example/maven2/, https://repo.example")
    clean_env.setenv(LOCAL_REPOSITORIES_ENV, str(tmp_path))

    config = get_maven_config()

    assert config.repositories == ("https://mirror.example/maven2", "https://repo.example")
    assert config.local_repositories == (tmp_path,)


def test_explicit_resilience(clean_env: pytest.MonkeyPatch) -> None:
    resilience = ResilienceConfig(name="custom", cache=None)

    assert get_maven_config(resilience=resilience).resilience is resilience
