"""
Shared fixtures: record factory, in-memory store and a hand-cranked scheduler.
"""

from typing import Callable

import pytest

from src.domain.entities.stock_record import StockRecord
from src.domain.ports.scheduler_port import ICancellationHandle, IScheduler
from src.infrastructure.stock_data.mock_dataset import MockStockDataset
from src.infrastructure.storage.in_memory_store import InMemoryKeyValueStore


def make_record(symbol: str, change_percent: float = 0.0, price: float = 100.0, **overrides) -> StockRecord:
    fields = dict(
        symbol=symbol,
        name=f"{symbol} Corp.",
        price=price,
        change=round(price * change_percent / 100, 4),
        change_percent=change_percent,
        volume=1_000_000,
        history=(price,) * 7,
        market_cap=1e9,
    )
    fields.update(overrides)
    return StockRecord(**fields)


class ManualHandle(ICancellationHandle):
    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler(IScheduler):
    """Records schedules; tick() fires every live callback once."""

    def __init__(self) -> None:
        self.jobs: list[tuple[float, Callable[[], None], ManualHandle]] = []

    def schedule_repeating(self, interval_seconds, callback) -> ICancellationHandle:
        handle = ManualHandle()
        self.jobs.append((interval_seconds, callback, handle))
        return handle

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            for _, callback, handle in list(self.jobs):
                if not handle.cancelled:
                    callback()

    @property
    def active_jobs(self) -> int:
        return sum(1 for _, _, handle in self.jobs if not handle.cancelled)


@pytest.fixture
def stocks() -> list[StockRecord]:
    return MockStockDataset().load()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
