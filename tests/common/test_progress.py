from __future__ import annotations

import asyncio
import io
from dataclasses import dataclass, field

import pytest

from albumcheck.common.progress import SPINNER_FRAMES, ProgressReporter


@dataclass
class FakeBar:
    kwargs: dict[str, object]
    n: int = 0
    total: int | None = None
    postfix: str = ""
    refreshes: list[tuple[int, int | None, str]] = field(default_factory=list)
    closed: bool = False

    def set_postfix_str(self, text: str, *, refresh: bool = True) -> None:
        self.postfix = text
        if refresh:
            self.refresh()

    def refresh(self) -> None:
        assert not self.closed
        self.refreshes.append((self.n, self.total, self.postfix))

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def bars() -> list[FakeBar]:
    return []


@pytest.fixture
def reporter(bars: list[FakeBar]) -> ProgressReporter:
    def factory(**kwargs: object) -> FakeBar:
        bar = FakeBar(kwargs=kwargs, total=kwargs.get("total"))  # type: ignore[arg-type]
        bars.append(bar)
        return bar

    return ProgressReporter(interval=0.01, bar_factory=factory)


def test_bar_mode_draws_latest_update_and_closes_on_stop(
    reporter: ProgressReporter,
    bars: list[FakeBar],
) -> None:
    async def scenario() -> None:
        reporter.start("Checking albums in library...", total=4)
        for current in range(1, 5):
            reporter.update(current, 4)
        await asyncio.sleep(0.05)
        await reporter.stop()

    asyncio.run(scenario())

    (bar,) = bars
    assert bar.kwargs["desc"] == "Checking albums in library..."
    assert bar.kwargs["total"] == 4
    assert bar.kwargs["leave"] is False
    assert bar.refreshes[-1][:2] == (4, 4)
    assert bar.closed
    assert not reporter.running
    assert reporter.current == 4


def test_spinner_mode_cycles_frames(reporter: ProgressReporter, bars: list[FakeBar]) -> None:
    async def scenario() -> None:
        reporter.start("Fetching Last.fm top albums...")
        await asyncio.sleep(0.08)
        await reporter.stop()

    asyncio.run(scenario())

    (bar,) = bars
    assert bar.kwargs["total"] is None
    frames = [postfix for _, _, postfix in bar.refreshes]
    assert len(frames) >= 2
    assert frames[:2] == [SPINNER_FRAMES[0], SPINNER_FRAMES[1]]
    assert bar.closed


def test_updates_after_stop_are_ignored(reporter: ProgressReporter, bars: list[FakeBar]) -> None:
    async def scenario() -> None:
        reporter.start("scan", total=2)
        reporter.update(1, 2)
        await reporter.stop()
        reporter.update(2, 2)
        await asyncio.sleep(0.03)

    asyncio.run(scenario())

    assert reporter.current == 1
    assert bars[0].closed


def test_reporter_can_run_two_phases(reporter: ProgressReporter, bars: list[FakeBar]) -> None:
    async def scenario() -> None:
        reporter.start("fetch")
        await reporter.stop()
        reporter.start("scan", total=3)
        reporter.update(3, 3)
        await reporter.stop()

    asyncio.run(scenario())

    assert [bar.kwargs["desc"] for bar in bars] == ["fetch", "scan"]
    assert all(bar.closed for bar in bars)


def test_start_twice_is_rejected(reporter: ProgressReporter) -> None:
    async def scenario() -> None:
        reporter.start("one")
        try:
            with pytest.raises(RuntimeError, match="already running"):
                reporter.start("two")
        finally:
            await reporter.stop()

    asyncio.run(scenario())


def test_stop_without_start_is_noop(reporter: ProgressReporter) -> None:
    asyncio.run(reporter.stop())

    assert not reporter.running


def test_real_tqdm_renders_to_stream() -> None:
    stream = io.StringIO()
    reporter = ProgressReporter(stream=stream, interval=0.01, disable=False)

    async def scenario() -> None:
        reporter.start("Checking albums in library...", total=2)
        reporter.update(1, 2)
        reporter.update(2, 2)
        await asyncio.sleep(0.05)
        await reporter.stop()

    asyncio.run(scenario())

    assert "Checking albums in library..." in stream.getvalue()
