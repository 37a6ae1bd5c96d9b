"""
Top Picks queue: the best performers, rotated one position at a time.
See docs/CleanArchitecture.md — Phase 2 for the architectural rationale.

Rotation is position-only. Membership and length never change, so a full
cycle of len(queue) rotations restores the initial ranked order.
"""

from collections import deque
from typing import Iterable, Optional

from src.domain.entities.stock_record import StockRecord
from src.domain.structures.sorting import SortField, merge_sort

DEFAULT_SIZE = 5


class TopPicksQueue:
    def __init__(self, records: Iterable[StockRecord] = ()) -> None:
        self._queue: deque[StockRecord] = deque(records)

    @classmethod
    def build(cls, records: Iterable[StockRecord], size: int = DEFAULT_SIZE) -> "TopPicksQueue":
        """Seed with the *size* highest change_percent records, best first.

        Ties keep dataset order because merge_sort is stable.
        """
        ranked = merge_sort(list(records), SortField.CHANGE_PERCENT, ascending=False)
        return cls(ranked[:size])

    def enqueue(self, record: StockRecord) -> None:
        self._queue.append(record)

    def dequeue(self) -> Optional[StockRecord]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def rotate(self) -> None:
        head = self.dequeue()
        if head is not None:
            self.enqueue(head)

    def featured(self) -> Optional[StockRecord]:
        return self._queue[0] if self._queue else None

    def all(self) -> list[StockRecord]:
        return list(self._queue)

    def __len__(self) -> int:
        return len(self._queue)
