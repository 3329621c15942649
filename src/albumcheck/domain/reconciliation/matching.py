"""Decide whether a history record is already in the library."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .normalize import names_equal

if TYPE_CHECKING:
    from collections.abc import Iterable

    from albumcheck.domain.types import HistoryRecord, LibraryCandidate


def matches(record: HistoryRecord, candidates: Iterable[LibraryCandidate]) -> bool:
    """True if any candidate has the record's title and artist after normalization."""

    return any(
        names_equal(candidate.title, record.title)
        and names_equal(candidate.artist_name, record.artist_name)
        for candidate in candidates
    )
