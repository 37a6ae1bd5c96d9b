"""
Infrastructure adapter: asyncio event loop → IScheduler.
See docs/CleanArchitecture.md — Phase 4 for the architectural rationale.

Each repeating schedule is one task on the running loop that sleeps, then
calls back synchronously. Everything runs on the loop's thread, so callbacks
never overlap with request handlers mid-operation.
"""

import asyncio
import logging
from typing import Callable, Optional

from src.domain.ports.scheduler_port import ICancellationHandle, IScheduler

logger = logging.getLogger(__name__)


class AsyncioTaskHandle(ICancellationHandle):
    def __init__(self, task: asyncio.Task) -> None:
        self._task = task
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._task.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class AsyncioScheduler(IScheduler):
    """Schedules callbacks on *loop*, or on the running loop when none is given."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> ICancellationHandle:
        """Start repeating *callback*.

        Raises:
            ValueError: if *interval_seconds* is not positive.
            RuntimeError: if no loop was given and none is running.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(self._repeat(interval_seconds, callback))
        return AsyncioTaskHandle(task)

    @staticmethod
    async def _repeat(interval_seconds: float, callback: Callable[[], None]) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                callback()
            except Exception:
                logger.exception("Scheduled callback %r failed", callback)
