"""
Coalescing timer.

Usage:
    debouncer = Debouncer(0.3, rerender)
    debouncer.schedule()   # called on every notification
    debouncer.schedule()   # resets the pending timer

Only the last ``schedule()`` of a burst runs ``rerender``, once the quiet
window has elapsed.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    def __init__(self, delay: float, callback: Callable[[], Awaitable[None]]):
        self.delay = delay
        self.callback = callback
        self.fire_count = 0
        self._handle: Optional[asyncio.TimerHandle] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        """Arm the timer, replacing any pending one."""
        if self._handle is not None:
            self._handle.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def wait_idle(self) -> None:
        """Wait for the last fired callback to finish."""
        if self._task is not None:
            await asyncio.shield(self._task)

    def _fire(self) -> None:
        self._handle = None
        self.fire_count += 1
        logger.debug(f"Quiet window of {self.delay:.3f}s elapsed, firing")
        self._task = asyncio.ensure_future(self._run())

    async def _run(self) -> None:
        try:
            await self.callback()
        except Exception as e:
            # nothing awaits this task, so report here
            logger.exception(f"Debounced callback failed: {e}")
