"""Fixed-rate tick driver."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class SimulationClock:
    """Calls ``on_tick`` once per period until stopped.

    Deadlines are scheduled against a monotonic clock so sleep jitter does
    not accumulate. When a tick overruns a whole period the schedule is
    reset instead of firing a burst of catch-up ticks.
    """

    def __init__(
        self,
        on_tick: Callable[[], object],
        ticks_per_second: float = 8.0,
        time_fn: Callable[[], float] = time.monotonic,
        sleep_fn: Callable[[float], object] = time.sleep,
        async_sleep_fn: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        if ticks_per_second <= 0:
            raise ValueError("ticks_per_second must be positive.")
        self.on_tick = on_tick
        self.interval = 1.0 / ticks_per_second
        self._time = time_fn
        self._sleep = sleep_fn
        self._async_sleep = async_sleep_fn
        self.ticks = 0
        self.running = False

    def stop(self) -> None:
        """Ask the loop to exit before its next tick."""
        self.running = False

    def _next_deadline(self, deadline: float) -> float:
        deadline += self.interval
        now = self._time()
        if now - deadline > self.interval:
            logger.debug("Clock fell behind by %.3fs; resyncing.", now - deadline)
            deadline = now
        return deadline

    def _fire(self) -> None:
        try:
            self.on_tick()
        except Exception:
            logger.exception("Tick %d failed; stopping clock.", self.ticks)
            self.running = False
            raise
        self.ticks += 1

    def run(self, max_ticks: int | None = None) -> int:
        """Run the loop in the calling thread. Returns ticks fired."""
        self.running = True
        fired = 0
        logger.info("Clock started at %.1f ticks/s.", 1.0 / self.interval)
        deadline = self._time()
        try:
            while self.running and (max_ticks is None or fired < max_ticks):
                deadline = self._next_deadline(deadline)
                delay = deadline - self._time()
                if delay > 0:
                    self._sleep(delay)
                if not self.running:
                    break
                self._fire()
                fired += 1
        finally:
            self.running = False
            logger.info("Clock stopped after %d ticks.", fired)
        return fired

    async def run_async(self, max_ticks: int | None = None) -> int:
        """Run the loop as an ``asyncio`` task. Returns ticks fired."""
        self.running = True
        fired = 0
        logger.info("Clock started at %.1f ticks/s.", 1.0 / self.interval)
        deadline = self._time()
        try:
            while self.running and (max_ticks is None or fired < max_ticks):
                deadline = self._next_deadline(deadline)
                await self._async_sleep(max(deadline - self._time(), 0.0))
                if not self.running:
                    break
                self._fire()
                fired += 1
        except asyncio.CancelledError:
            logger.info("Clock cancelled.")
            raise
        finally:
            self.running = False
            logger.info("Clock stopped after %d ticks.", fired)
        return fired
