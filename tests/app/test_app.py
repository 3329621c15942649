from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import httpx
import pytest

from albumcheck.app import check_missing_albums
from albumcheck.common.progress import ProgressReporter
from albumcheck.domain.cancellation import CancellationToken
from albumcheck.domain.errors import RequestCancelledError, UnexpectedStatusError
from albumcheck.domain.types import HistoryRecord

if TYPE_CHECKING:
    from pathlib import Path

    from albumcheck.config import AlbumCheckConfig

TOP_ALBUMS = [
    ("Kid A", "Radiohead"),
    ("Dummy", "Portishead"),
    ("Blue Lines", "Massive Attack"),
    ("Mezzanine (Deluxe Edition)", "Massive Attack"),
    ("Richard D. James Album", "Aphex Twin"),
]

# Keyed by the normalized search query.
LIBRARY = {
    "Kid A": [("Kid A", "Radiohead")],
    "Mezzanine": [("Mezzanine", "Massive Attack")],
    "Richard D James Album": [("Richard D. James Album", "Tribute Ensemble")],
}


def _url(title: str, artist: str) -> str:
    return f"https://www.last.fm/music/{artist}/{title}".replace(" ", "+")


def _lastfm_payload() -> dict[str, object]:
    return {
        "topalbums": {
            "album": [
                {
                    "name": title,
                    "url": _url(title, artist),
                    "artist": {"name": artist},
                    "playcount": "10",
                }
                for title, artist in TOP_ALBUMS
            ],
            "@attr": {"user": "demo-user"},
        }
    }


def _subsonic_payload(query: str) -> dict[str, object]:
    albums = [{"name": name, "artist": artist} for name, artist in LIBRARY.get(query, [])]
    return {
        "subsonic-response": {
            "status": "ok",
            "version": "1.16.1",
            "searchResult3": {"album": albums},
        }
    }


class FakeServers:
    def __init__(self, *, lastfm_status: int = 200) -> None:
        self.lastfm_status = lastfm_status
        self.queries: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "lastfm.test":
            if self.lastfm_status != httpx.codes.OK:
                return httpx.Response(self.lastfm_status)
            return httpx.Response(200, json=_lastfm_payload())
        assert request.url.host == "music.test"
        assert request.url.path == "/rest/search3.view"
        query = request.url.params["query"]
        self.queries.append(query)
        return httpx.Response(200, json=_subsonic_payload(query))


def _quiet_progress() -> ProgressReporter:
    return ProgressReporter(disable=True, interval=0.01)


def test_check_missing_albums_end_to_end(albumcheck_config: AlbumCheckConfig) -> None:
    servers = FakeServers()
    progress = _quiet_progress()

    result = check_missing_albums(
        config=albumcheck_config,
        ignored=frozenset({_url("Blue Lines", "Massive Attack")}),
        progress=progress,
        transport=httpx.MockTransport(servers),
    )

    assert result.recommendations == [
        HistoryRecord(
            title="Dummy",
            artist_name="Portishead",
            source_url=_url("Dummy", "Portishead"),
        ),
        HistoryRecord(
            title="Richard D. James Album",
            artist_name="Aphex Twin",
            source_url=_url("Richard D. James Album", "Aphex Twin"),
        ),
    ]
    assert servers.queries == ["Kid A", "Dummy", "Mezzanine", "Richard D James Album"]
    assert result.stats.total == 4
    assert result.stats.successful == 4
    assert not result.stats.has_failures
    assert not progress.running


def test_check_stops_at_recommendation_limit(albumcheck_config: AlbumCheckConfig) -> None:
    config = replace(
        albumcheck_config,
        reconcile=replace(albumcheck_config.reconcile, max_recommendations=1),
    )
    servers = FakeServers()

    result = check_missing_albums(
        config=config,
        ignored=frozenset(),
        progress=_quiet_progress(),
        transport=httpx.MockTransport(servers),
    )

    assert [album.title for album in result.recommendations] == ["Dummy"]
    assert servers.queries == ["Kid A", "Dummy"]


def test_ignore_file_from_config_is_loaded(
    albumcheck_config: AlbumCheckConfig,
    tmp_path: Path,
) -> None:
    ignore_file = tmp_path / "ignore.txt"
    ignore_file.write_text(
        f"{_url('Dummy', 'Portishead')}\n\n  {_url('Blue Lines', 'Massive Attack')}  \n",
        encoding="utf-8",
    )
    config = replace(
        albumcheck_config,
        reconcile=replace(albumcheck_config.reconcile, ignore_file=ignore_file),
    )

    result = check_missing_albums(
        config=config,
        progress=_quiet_progress(),
        transport=httpx.MockTransport(FakeServers()),
    )

    assert [album.title for album in result.recommendations] == ["Richard D. James Album"]


def test_history_failure_aborts_the_run(albumcheck_config: AlbumCheckConfig) -> None:
    servers = FakeServers(lastfm_status=503)
    progress = _quiet_progress()

    with pytest.raises(UnexpectedStatusError, match="status 503") as exc:
        check_missing_albums(
            config=albumcheck_config,
            ignored=frozenset(),
            progress=progress,
            transport=httpx.MockTransport(servers),
        )

    assert exc.value.attempts == 3
    assert servers.queries == []
    assert not progress.running


def test_cancelled_run_raises(albumcheck_config: AlbumCheckConfig) -> None:
    token = CancellationToken()
    token.cancel("interrupted")

    with pytest.raises(RequestCancelledError, match="interrupted"):
        check_missing_albums(
            config=albumcheck_config,
            ignored=frozenset(),
            token=token,
            progress=_quiet_progress(),
            transport=httpx.MockTransport(FakeServers()),
        )
