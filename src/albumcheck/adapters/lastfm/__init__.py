"""Public interface for the Last.fm adapter."""

from __future__ import annotations

from .client import DEFAULT_TOP_ALBUMS_LIMIT, LastFmAPIError, LastFmClient
from .schema import AlbumPayload, AlbumPayloadInput, TopAlbumsResponse
from .translator import parse_history_record

__all__ = [
    "DEFAULT_TOP_ALBUMS_LIMIT",
    "AlbumPayload",
    "AlbumPayloadInput",
    "LastFmAPIError",
    "LastFmClient",
    "TopAlbumsResponse",
    "parse_history_record",
]
