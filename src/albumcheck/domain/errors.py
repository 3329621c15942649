"""Errors raised while talking to the history and library sources."""

from __future__ import annotations


class AlbumCheckError(RuntimeError):
    """Base class for albumcheck runtime errors."""


class SourceError(AlbumCheckError):
    """A single request to a remote source failed.

    The reconciliation engine absorbs these per record; only a failure to fetch the
    listening history aborts a run.
    """


class TransportError(SourceError):
    """No response could be obtained (connection, DNS or timeout failure)."""

    def __init__(self, message: str, *, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class UnexpectedStatusError(SourceError):
    """Every attempt ended with a status other than 200."""

    def __init__(self, message: str, *, status: int, attempts: int) -> None:
        super().__init__(message)
        self.status = status
        self.attempts = attempts


class PayloadError(SourceError):
    """The response body was not the JSON structure the source promises."""


class RequestCancelledError(AlbumCheckError):
    """The run's deadline passed or it was cancelled explicitly."""
