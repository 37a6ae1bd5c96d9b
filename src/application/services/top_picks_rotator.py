"""
Application service: drives the Top Picks rotation from a repeating timer.
See docs/CleanArchitecture.md — Phase 4 for the architectural rationale.

The queue's rotate() stays a pure state transition; this service only wires it
to an injected IScheduler and owns the cancellation handle so the owning view
can stop rotation on teardown.
"""

import logging
from typing import Optional

from src.domain.entities.stock_record import StockRecord
from src.domain.ports.scheduler_port import ICancellationHandle, IScheduler
from src.domain.structures.rotation_queue import TopPicksQueue

logger = logging.getLogger(__name__)


class TopPicksRotator:
    ROTATION_INTERVAL_SECONDS: float = 5.0

    def __init__(
        self,
        queue: TopPicksQueue,
        scheduler: IScheduler,
        interval_seconds: Optional[float] = None,
    ) -> None:
        self._queue = queue
        self._scheduler = scheduler
        self._interval = interval_seconds or self.ROTATION_INTERVAL_SECONDS
        self._handle: Optional[ICancellationHandle] = None

    @property
    def is_running(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    def start(self) -> None:
        if self.is_running:
            return
        self._handle = self._scheduler.schedule_repeating(self._interval, self._tick)
        logger.info("Top picks rotation started (every %.1fs, %d picks)", self._interval, len(self._queue))

    def stop(self) -> None:
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        logger.info("Top picks rotation stopped")

    def picks(self) -> list[StockRecord]:
        return self._queue.all()

    def featured(self) -> Optional[StockRecord]:
        return self._queue.featured()

    def _tick(self) -> None:
        self._queue.rotate()
        head = self._queue.featured()
        logger.debug("Rotated top picks; featured is now %s", head.symbol if head else None)
