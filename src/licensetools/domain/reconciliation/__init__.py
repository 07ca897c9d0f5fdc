"""Reconciliation of resolved dependencies against the library manifest."""

from __future__ import annotations

from .engine import (
    ReconciliationFailure,
    ReconciliationResult,
    licenses_unmatched,
    not_listed_in,
    reconcile,
)

__all__ = [
    "ReconciliationFailure",
    "ReconciliationResult",
    "licenses_unmatched",
    "not_listed_in",
    "reconcile",
]
