"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import HistorySource, LibrarySource
from .progress import ProgressSink

__all__ = ["HistorySource", "LibrarySource", "ProgressSink"]
