"""Application configuration helpers."""

from __future__ import annotations

from .audit import AuditConfig, get_audit_config
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .maven import MavenConfig, get_maven_config

__all__ = [
    "AuditConfig",
    "CacheConfig",
    "ConfigurationError",
    "MavenConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_audit_config",
    "get_maven_config",
]
