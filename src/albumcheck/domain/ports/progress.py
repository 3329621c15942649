"""Port for observing scan progress."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressSink(Protocol):
    def update(self, current: int, total: int) -> None:
        """Record that ``current`` of ``total`` records have been processed.

        Implementations must not block; the scan calls this once per record.
        """
        ...


__all__ = ["ProgressSink"]
