"""Per-run counters and classification of per-record lookup failures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCategory(StrEnum):
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    NETWORK = "network"
    OTHER = "other"


# Checked in order; the first category with a marker in the error text wins.
_CATEGORY_MARKERS: tuple[tuple[ErrorCategory, tuple[str, ...]], ...] = (
    (ErrorCategory.RATE_LIMITED, ("429", "rate limit", "too many requests")),
    (
        ErrorCategory.SERVER_ERROR,
        (
            "500",
            "502",
            "503",
            "504",
            "internal server error",
            "bad gateway",
            "service unavailable",
            "gateway timeout",
        ),
    ),
    (
        ErrorCategory.NETWORK,
        (
            "connection",
            "connect",
            "timeout",
            "network",
            "dial",
            "no such host",
            "name or service not known",
            "name resolution",
        ),
    ),
)


def categorize_error(error: BaseException) -> ErrorCategory:
    text = str(error).lower()
    for category, markers in _CATEGORY_MARKERS:
        if any(marker in text for marker in markers):
            return category
    return ErrorCategory.OTHER


@dataclass(slots=True)
class ErrorStats:
    """Outcome counters of one scan; ``total`` excludes ignored records."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    rate_limited: int = 0
    server_error: int = 0
    network: int = 0
    other: int = 0

    def record_success(self) -> None:
        self.successful += 1

    def record_failure(self, error: BaseException) -> ErrorCategory:
        self.failed += 1
        category = categorize_error(error)
        match category:
            case ErrorCategory.RATE_LIMITED:
                self.rate_limited += 1
            case ErrorCategory.SERVER_ERROR:
                self.server_error += 1
            case ErrorCategory.NETWORK:
                self.network += 1
            case ErrorCategory.OTHER:
                self.other += 1
        return category

    @property
    def has_failures(self) -> bool:
        return self.failed > 0
