"""Public interface for the Subsonic adapter."""

from __future__ import annotations

from .client import SubsonicAPIError, SubsonicClient, make_token, timestamp_salt
from .schema import SearchResponse
from .translator import parse_library_candidate

__all__ = [
    "SearchResponse",
    "SubsonicAPIError",
    "SubsonicClient",
    "make_token",
    "parse_library_candidate",
    "timestamp_salt",
]
