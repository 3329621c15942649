"""Translate Subsonic payloads into library candidates."""

from __future__ import annotations

from albumcheck.domain.types import LibraryCandidate

from .schema import AlbumPayload, AlbumPayloadInput


def parse_library_candidate(album: AlbumPayloadInput) -> LibraryCandidate:
    payload = album if isinstance(album, AlbumPayload) else AlbumPayload.model_validate(album)
    return LibraryCandidate(title=payload.name, artist_name=payload.artist)
