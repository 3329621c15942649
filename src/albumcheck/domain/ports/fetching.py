"""Ports for fetching history records and searching the library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from albumcheck.domain.cancellation import CancellationToken
    from albumcheck.domain.types import HistoryRecord, LibraryCandidate


@runtime_checkable
class HistorySource(Protocol):
    """Ranked listening history, most played first."""

    async def fetch_top(
        self,
        *,
        user: str,
        limit: int,
        token: CancellationToken | None = None,
    ) -> Sequence[HistoryRecord]: ...


@runtime_checkable
class LibrarySource(Protocol):
    """Search over the albums the user owns."""

    async def search(
        self,
        title: str,
        *,
        token: CancellationToken | None = None,
    ) -> Sequence[LibraryCandidate]: ...

    async def exists(
        self,
        record: HistoryRecord,
        *,
        token: CancellationToken | None = None,
    ) -> bool: ...


__all__ = ["HistorySource", "LibrarySource"]
