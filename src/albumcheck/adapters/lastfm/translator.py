"""Translate Last.fm payloads into history records."""

from __future__ import annotations

from albumcheck.domain.types import HistoryRecord

from .schema import AlbumPayload, AlbumPayloadInput


def _ensure_album_payload(album: AlbumPayloadInput) -> AlbumPayload:
    if isinstance(album, AlbumPayload):
        return album
    return AlbumPayload.model_validate(album)


def parse_history_record(album: AlbumPayloadInput) -> HistoryRecord:
    payload = _ensure_album_payload(album)
    return HistoryRecord(
        title=payload.name,
        artist_name=payload.artist.name,
        source_url=payload.url,
    )
