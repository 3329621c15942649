"""Run-level settings for the reconciliation scan."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .env import env_flag, optional_positive_float

DEFAULT_HISTORY_LIMIT = 500
DEFAULT_MAX_RECOMMENDATIONS = 5
DEFAULT_DEADLINE_SECONDS = 60.0


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    history_limit: int = DEFAULT_HISTORY_LIMIT
    max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS
    deadline_seconds: float = DEFAULT_DEADLINE_SECONDS
    ignore_file: Path | None = None
    verbose: bool = False


def get_reconcile_config() -> ReconcileConfig:
    ignore_file = os.getenv("IGNORE_FILE", "").strip()
    deadline = optional_positive_float("ALBUMCHECK_DEADLINE_SECONDS")
    return ReconcileConfig(
        deadline_seconds=deadline or DEFAULT_DEADLINE_SECONDS,
        ignore_file=Path(ignore_file).expanduser() if ignore_file else None,
        verbose=env_flag("VERBOSE"),
    )
