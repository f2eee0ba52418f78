import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from cricauction.countdown import CountdownTicker
from cricauction.formatting import TimeRemaining


START = datetime(2025, 4, 29, 8, 59, 57, tzinfo=timezone.utc)


class SteppingClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now


def test_ticker_rejects_bad_arguments():
    with pytest.raises(ValueError):
        CountdownTicker(None, lambda remaining: None)
    with pytest.raises(ValueError):
        CountdownTicker(START, lambda remaining: None, interval=0)


def test_remaining_uses_injected_clock():
    ticker = CountdownTicker(START + timedelta(minutes=2), lambda remaining: None, now=lambda: START)
    assert ticker.remaining() == TimeRemaining(minutes=2)


@pytest.mark.anyio
async def test_ticker_stops_when_target_reached():
    clock = SteppingClock(START)
    ticks: list[TimeRemaining] = []

    def on_tick(remaining: TimeRemaining) -> None:
        ticks.append(remaining)
        clock.now += timedelta(seconds=1)

    ticker = CountdownTicker(START + timedelta(seconds=3), on_tick, interval=0.001, now=clock)
    await asyncio.wait_for(ticker.start(), timeout=2)

    assert [tick.seconds for tick in ticks] == [3, 2, 1, 0]
    assert ticks[-1].expired
    assert not ticker.running


@pytest.mark.anyio
async def test_cancel_stops_further_ticks():
    ticks: list[TimeRemaining] = []
    ticker = CountdownTicker(
        datetime.now(timezone.utc) + timedelta(days=1),
        ticks.append,
        interval=0.001,
    )
    ticker.start()
    for _ in range(200):
        if len(ticks) >= 2:
            break
        await asyncio.sleep(0.005)

    await ticker.cancel()
    seen = len(ticks)
    await asyncio.sleep(0.02)

    assert seen >= 2
    assert len(ticks) == seen
    assert not ticker.running


@pytest.mark.anyio
async def test_cancel_before_start_is_a_no_op():
    ticker = CountdownTicker(START, lambda remaining: None)
    await ticker.cancel()
    assert not ticker.running


@pytest.mark.anyio
async def test_ticker_context_manager_and_double_start():
    ticks: list[TimeRemaining] = []
    target = datetime.now(timezone.utc) + timedelta(hours=1)
    async with CountdownTicker(target, ticks.append, interval=0.001) as ticker:
        await asyncio.sleep(0.01)
        assert ticker.running
        with pytest.raises(RuntimeError):
            ticker.start()

    assert not ticker.running
    assert ticks
    assert not any(tick.expired for tick in ticks)


@pytest.mark.anyio
async def test_cancelling_the_caller_of_cancel_propagates():
    ticker = CountdownTicker(
        datetime.now(timezone.utc) + timedelta(hours=1),
        lambda remaining: None,
        interval=0.001,
    )
    ticker.start()
    await asyncio.sleep(0.005)

    stopper = asyncio.get_running_loop().create_task(ticker.cancel())
    await asyncio.sleep(0)
    stopper.cancel()

    with pytest.raises(asyncio.CancelledError):
        await stopper
    assert not ticker.running
