"""Process-wide admission queue for outbound Gemini calls."""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from ui_designer_mcp.core.resilience.models import Clock, SleepFunc

logger = logging.getLogger(__name__)


class RequestScheduler:
    """Serializes and paces every outbound call.

    Callers enter through :meth:`admit` in arrival order. At most one
    admitted call is in flight at a time, and consecutive call starts are at
    least ``min_interval`` seconds apart. A zero interval disables pacing but
    calls stay serialized.

    Example:
        scheduler = RequestScheduler(min_interval=0.05)
        async with scheduler.admit():
            response = await client.generate_text(model, prompt)
    """

    def __init__(
        self,
        min_interval: float = 0.05,
        *,
        clock: Clock = time.monotonic,
        sleep: Optional[SleepFunc] = None,
    ) -> None:
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self._min_interval = float(min_interval)
        self._clock = clock
        self._sleep = sleep or asyncio.sleep
        self._last_start: Optional[float] = None
        # Created on first use so the lock binds to the running loop
        self._lock: Optional[asyncio.Lock] = None
        self._queued = 0
        self._admitted = 0

    def _get_lock(self) -> asyncio.Lock:
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    @property
    def min_interval(self) -> float:
        return self._min_interval

    @property
    def last_start(self) -> Optional[float]:
        """Clock reading when the most recent call was admitted."""
        return self._last_start

    @property
    def queued(self) -> int:
        """Callers waiting for admission plus the one in flight."""
        return self._queued

    @property
    def admitted(self) -> int:
        return self._admitted

    def time_until_next_slot(self) -> float:
        """Seconds a caller admitted right now would still have to wait."""
        if self._last_start is None:
            return 0.0
        elapsed = self._clock() - self._last_start
        return max(0.0, self._min_interval - elapsed)

    @asynccontextmanager
    async def admit(self) -> AsyncIterator[float]:
        """Wait for this caller's turn and pacing slot.

        Yields the start time recorded for the call. The slot is released
        when the block exits, however it exits.
        """
        self._queued += 1
        try:
            async with self._get_lock():
                wait = self.time_until_next_slot()
                if wait > 0:
                    logger.debug("Pacing request: waiting %.0fms", wait * 1000)
                    await self._sleep(wait)
                started = self._clock()
                self._last_start = started
                self._admitted += 1
                yield started
        finally:
            self._queued -= 1
