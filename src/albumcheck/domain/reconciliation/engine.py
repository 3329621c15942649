"""Scan the listening history for albums missing from the library."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from albumcheck.domain.cancellation import CancellationToken
from albumcheck.domain.errors import SourceError

from .stats import ErrorStats

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from albumcheck.domain.ports import LibrarySource, ProgressSink
    from albumcheck.domain.types import HistoryRecord

MAX_RECOMMENDATIONS = 5

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationResult:
    """Missing albums in history order, plus the counters of the scan."""

    recommendations: list[HistoryRecord] = field(default_factory=list)
    stats: ErrorStats = field(default_factory=ErrorStats)


async def find_missing_albums(
    history: Sequence[HistoryRecord],
    *,
    library: LibrarySource,
    ignored: Collection[str] = frozenset(),
    progress: ProgressSink | None = None,
    token: CancellationToken | None = None,
    limit: int = MAX_RECOMMENDATIONS,
    verbose: bool = False,
) -> ReconciliationResult:
    """Walk ``history`` in order and collect up to ``limit`` albums the library lacks.

    Ignored records are skipped without a lookup and without touching the counters.
    A failed lookup is counted, classified and skipped; it never ends the scan. The
    scan stops early once ``limit`` albums were collected. Cancellation of ``token``
    is not absorbed and propagates as ``RequestCancelledError``.

    Duplicate records are looked up independently, so a history listing the same
    album twice may yield it twice.
    """

    if limit < 1:
        raise ValueError("limit must be at least 1")

    active_token = token or CancellationToken()
    result = ReconciliationResult()
    stats = result.stats
    total = len(history)
    failure_level = logging.WARNING if verbose else logging.DEBUG

    for index, record in enumerate(history, start=1):
        active_token.raise_if_cancelled()

        if record.source_url in ignored:
            log.debug("Skipping ignored album %s", record.source_url)
        else:
            stats.total += 1
            try:
                exists = await library.exists(record, token=active_token)
            except SourceError as exc:
                category = stats.record_failure(exc)
                log.log(
                    failure_level,
                    "Error checking album '%s - %s' (%s): %s",
                    record.artist_name,
                    record.title,
                    category,
                    exc,
                )
            else:
                stats.record_success()
                if not exists:
                    result.recommendations.append(record)

        if progress is not None:
            progress.update(index, total)

        if len(result.recommendations) >= limit:
            log.debug("Collected %s missing albums after %s of %s", limit, index, total)
            break

    return result
