"""Plain-text rendering of a check result for the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from albumcheck.domain.reconciliation import ErrorStats
    from albumcheck.domain.types import HistoryRecord

NOTHING_MISSING_MESSAGE = "All top albums exist in your Subsonic library!"
_RULE_WIDTH = 80


def format_recommendations(albums: Sequence[HistoryRecord]) -> str:
    if not albums:
        return NOTHING_MISSING_MESSAGE

    lines = ["RECOMMENDED ALBUMS", "=" * _RULE_WIDTH]
    for index, album in enumerate(albums, start=1):
        lines.append(f"{index}. {album.artist_name} - {album.title}")
        lines.append(f"   Last.fm URL:  {album.source_url}")
        lines.append("-" * _RULE_WIDTH)
    return "\n".join(lines)


def format_error_stats(stats: ErrorStats) -> str | None:
    """Summary line plus one hint per failure category, or None without failures."""

    if not stats.has_failures:
        return None

    lines = [
        f"API Statistics: {stats.successful}/{stats.total} requests successful "
        f"({stats.failed} failed)"
    ]
    hints = (
        (
            stats.rate_limited,
            "Rate limiting detected ({}) - server may be limiting API calls",
        ),
        (
            stats.server_error,
            "Server errors detected ({}) - Subsonic server may be overloaded",
        ),
        (
            stats.network,
            "Network issues detected ({}) - connection problems to server",
        ),
        (
            stats.other,
            "Other errors detected ({}) - run with --verbose for details",
        ),
    )
    for count, template in hints:
        if count:
            noun = "request" if count == 1 else "requests"
            lines.append("⚠️  " + template.format(f"{count} {noun}"))
    return "\n".join(lines)
