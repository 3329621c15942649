"""Progress display running as its own asyncio task.

The reporter is an actor: callers enqueue ``start``/``update``/``stop`` commands and
never wait for the display. Only the task touches the tqdm bar, redrawing it on a
fixed tick until it receives the stop command. ``stop`` waits for the task to finish,
so nothing is drawn after it returns.
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tqdm import tqdm

if TYPE_CHECKING:
    from typing import TextIO

    from albumcheck.domain.ports import ProgressSink

DEFAULT_REDRAW_INTERVAL = 0.1
SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

BarFactory = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class _Start:
    message: str
    total: int | None


@dataclass(frozen=True, slots=True)
class _Update:
    current: int
    total: int


@dataclass(frozen=True, slots=True)
class _Stop:
    pass


type _Command = _Start | _Update | _Stop


class ProgressReporter:
    """Spinner (no total) or bar (known total) driven by queued commands."""

    def __init__(
        self,
        *,
        stream: TextIO | None = None,
        interval: float = DEFAULT_REDRAW_INTERVAL,
        bar_factory: BarFactory = tqdm,
        disable: bool | None = None,
    ) -> None:
        self._stream = stream
        self._interval = interval
        self._bar_factory = bar_factory
        self._disable = disable
        self._commands: asyncio.Queue[_Command] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None
        self._stopping = False

        # Owned by the display task once started.
        self._bar: Any = None
        self._spinner = itertools.cycle(SPINNER_FRAMES)
        self._current = 0
        self._total: int | None = None

    @property
    def running(self) -> bool:
        return self._task is not None

    @property
    def current(self) -> int:
        return self._current

    @property
    def total(self) -> int | None:
        return self._total

    def start(self, message: str, total: int | None = None) -> None:
        if self._task is not None:
            raise RuntimeError("Progress reporter is already running")
        self._commands = asyncio.Queue()
        self._stopping = False
        self._commands.put_nowait(_Start(message=message, total=total))
        self._task = asyncio.create_task(self._run(), name="albumcheck-progress")

    def update(self, current: int, total: int) -> None:
        if self._task is None or self._stopping:
            return
        self._commands.put_nowait(_Update(current=current, total=total))

    async def stop(self) -> None:
        task = self._task
        if task is None:
            return
        if not self._stopping:
            self._stopping = True
            self._commands.put_nowait(_Stop())
        try:
            await task
        finally:
            self._task = None

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        try:
            while True:
                timeout = max(next_tick - loop.time(), 0.0)
                try:
                    command = await asyncio.wait_for(self._commands.get(), timeout)
                except TimeoutError:
                    self._redraw()
                    next_tick = loop.time() + self._interval
                    continue
                match command:
                    case _Start(message=message, total=total):
                        self._open(message, total)
                    case _Update(current=current, total=total):
                        self._current = current
                        self._total = total
                    case _Stop():
                        return
        finally:
            self._close()

    def _open(self, message: str, total: int | None) -> None:
        self._close()
        self._current = 0
        self._total = total
        if total is None:
            self._bar = self._bar_factory(
                desc=message,
                total=None,
                bar_format="{desc} {postfix}",
                file=self._stream,
                leave=False,
                disable=self._disable,
            )
        else:
            self._bar = self._bar_factory(
                desc=message,
                total=total,
                unit="album",
                file=self._stream,
                leave=False,
                disable=self._disable,
            )

    def _redraw(self) -> None:
        bar = self._bar
        if bar is None:
            return
        if self._total is None:
            bar.set_postfix_str(next(self._spinner), refresh=False)
        else:
            bar.total = self._total
            bar.n = self._current
        bar.refresh()

    def _close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


if TYPE_CHECKING:
    _sink_check: ProgressSink = ProgressReporter()
