"""Cancellation token bounding every request of one run."""

from __future__ import annotations

import asyncio
import time
from contextlib import suppress
from typing import TYPE_CHECKING

from .errors import RequestCancelledError

if TYPE_CHECKING:
    from collections.abc import Awaitable


class CancellationToken:
    """Deadline plus explicit cancel switch, shared by every request of a run.

    The deadline is measured on ``time.monotonic`` so a token may be created before
    the event loop that observes it.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._event = asyncio.Event()
        self._reason: str | None = None

    def cancel(self, reason: str = "cancelled") -> None:
        if self._reason is None:
            self._reason = reason
        self._event.set()

    def remaining(self) -> float | None:
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise self._error()

    async def sleep(self, delay: float) -> None:
        """Sleep for ``delay`` seconds, returning early with an error once cancelled."""

        self.raise_if_cancelled()
        remaining = self.remaining()
        timeout = delay if remaining is None else min(delay, remaining)
        with suppress(TimeoutError):
            await asyncio.wait_for(self._event.wait(), timeout)
        self.raise_if_cancelled()

    async def guard[T](self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable``, aborting it as soon as the token fires."""

        if self.cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise self._error()
        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait(
                {task, waiter},
                timeout=self.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
            if task in done:
                return task.result()
        finally:
            waiter.cancel()
            if not task.done():
                task.cancel()
                with suppress(asyncio.CancelledError):
                    await task
        raise self._error()

    def _error(self) -> RequestCancelledError:
        if self._reason is not None:
            return RequestCancelledError(f"request cancelled: {self._reason}")
        return RequestCancelledError("request cancelled: deadline exceeded")
