"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def split_list(value: str) -> tuple[str, ...]:
    """Split a comma separated value, dropping blanks."""

    return tuple(item.strip() for item in value.split(",") if item.strip())


def env_list(name: str, default: Sequence[str] = ()) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return tuple(default)
    return split_list(value)


def env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()
