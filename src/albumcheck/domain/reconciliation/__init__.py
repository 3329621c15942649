"""Reconciliation of listening history against the library."""

from __future__ import annotations

from .engine import MAX_RECOMMENDATIONS, ReconciliationResult, find_missing_albums
from .matching import matches
from .normalize import names_equal, normalize
from .stats import ErrorCategory, ErrorStats, categorize_error

__all__ = [
    "MAX_RECOMMENDATIONS",
    "ErrorCategory",
    "ErrorStats",
    "ReconciliationResult",
    "categorize_error",
    "find_missing_albums",
    "matches",
    "names_equal",
    "normalize",
]
