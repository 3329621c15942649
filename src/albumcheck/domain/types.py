"""Records exchanged between the source adapters and the reconciliation engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HistoryRecord:
    """An album from the listening history, in the order the history ranks it."""

    title: str
    artist_name: str
    source_url: str


@dataclass(frozen=True, slots=True)
class LibraryCandidate:
    """An album the library search returned."""

    title: str
    artist_name: str
