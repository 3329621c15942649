"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from albumcheck.adapters.http_resilience import ResilientClient
from albumcheck.adapters.ignore_list import load_ignored_urls
from albumcheck.adapters.lastfm import LastFmClient
from albumcheck.adapters.subsonic import SubsonicClient
from albumcheck.common.progress import ProgressReporter
from albumcheck.config import get_albumcheck_config
from albumcheck.domain.cancellation import CancellationToken
from albumcheck.domain.reconciliation import ReconciliationResult, find_missing_albums

if TYPE_CHECKING:
    import httpx

    from albumcheck.config import AlbumCheckConfig

log = getLogger(__name__)


def check_missing_albums(
    *,
    config: AlbumCheckConfig | None = None,
    ignored: frozenset[str] | None = None,
    token: CancellationToken | None = None,
    progress: ProgressReporter | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ReconciliationResult:
    """Find top Last.fm albums missing from the Subsonic library.

    Raises ``SourceError`` if the Last.fm history cannot be fetched and
    ``RequestCancelledError`` once the run's deadline passes.
    """

    effective_config = config or get_albumcheck_config()
    settings = effective_config.reconcile
    effective_ignored = ignored if ignored is not None else load_ignored_urls(settings.ignore_file)
    effective_token = token or CancellationToken(timeout=settings.deadline_seconds)
    log.info(
        "Starting album check: user=%s, history_limit=%s, ignored=%s, deadline=%ss",
        effective_config.lastfm.user_name,
        settings.history_limit,
        len(effective_ignored),
        settings.deadline_seconds,
    )

    result = asyncio.run(
        _check_missing_albums_async(
            config=effective_config,
            ignored=effective_ignored,
            token=effective_token,
            progress=progress or ProgressReporter(),
            transport=transport,
        )
    )

    stats = result.stats
    log.info(
        "Finished album check: missing=%s, checked=%s, failed=%s",
        len(result.recommendations),
        stats.total,
        stats.failed,
    )
    return result


async def _check_missing_albums_async(
    *,
    config: AlbumCheckConfig,
    ignored: frozenset[str],
    token: CancellationToken,
    progress: ProgressReporter,
    transport: httpx.AsyncBaseTransport | None,
) -> ReconciliationResult:
    settings = config.reconcile
    async with ResilientClient(config.resilience, transport=transport) as client:
        lastfm = LastFmClient(config=config.lastfm, client=client)
        subsonic = SubsonicClient(config=config.subsonic, client=client)

        progress.start("Fetching Last.fm top albums...")
        try:
            history = await lastfm.fetch_top(
                user=config.lastfm.user_name,
                limit=settings.history_limit,
                token=token,
            )
        finally:
            await progress.stop()

        progress.start("Checking albums in library...", total=len(history))
        try:
            return await find_missing_albums(
                history,
                library=subsonic,
                ignored=ignored,
                progress=progress,
                token=token,
                limit=settings.max_recommendations,
                verbose=settings.verbose,
            )
        finally:
            await progress.stop()
