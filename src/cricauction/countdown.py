"""Periodic countdown towards a target time, driven by an asyncio task."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from cricauction.formatting import TimeRemaining, time_remaining
from cricauction.models.base import to_utc_datetime


logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CountdownTicker:
    """Call ``on_tick`` with the time remaining every ``interval`` seconds.

    The ticker stops on its own once the target is reached. After
    :meth:`cancel` returns, ``on_tick`` is never called again.
    """

    def __init__(
        self,
        target: Any,
        on_tick: Callable[[TimeRemaining], None],
        *,
        interval: float = 1.0,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        resolved = to_utc_datetime(target)
        if resolved is None:
            raise ValueError("countdown target is required")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._target = resolved
        self._on_tick = on_tick
        self._interval = interval
        self._now = now
        self._task: Optional[asyncio.Task] = None
        self._cancelled = False

    @property
    def target(self) -> datetime:
        return self._target

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def remaining(self) -> TimeRemaining:
        return time_remaining(self._target, self._now())

    def start(self) -> asyncio.Task:
        if self.running:
            raise RuntimeError("countdown already running")
        self._cancelled = False
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def _run(self) -> None:
        logger.debug("Countdown to %s started", self._target.isoformat())
        while not self._cancelled:
            remaining = self.remaining()
            self._on_tick(remaining)
            if remaining.expired:
                logger.debug("Countdown to %s reached its target", self._target.isoformat())
                return
            await asyncio.sleep(self._interval)

    async def cancel(self) -> None:
        self._cancelled = True
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        # The task keeps its own CancelledError; the caller's still propagates.
        await asyncio.wait([task])
        if not task.cancelled():
            task.result()
        logger.debug("Countdown to %s cancelled", self._target.isoformat())

    async def __aenter__(self) -> "CountdownTicker":
        self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.cancel()
