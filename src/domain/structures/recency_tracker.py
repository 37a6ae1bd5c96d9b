"""
Bounded most-recently-used list of visited symbols.
See docs/CleanArchitecture.md — Phase 2 for the architectural rationale.
"""

from typing import Iterable

DEFAULT_CAPACITY = 5


class RecencyTracker:
    """Keeps at most *capacity* distinct symbols, oldest evicted first.

    Storage order is oldest-first; all() reports most-recent-first.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._symbols: list[str] = []

    @classmethod
    def from_stored(
        cls, symbols: Iterable[str], capacity: int = DEFAULT_CAPACITY
    ) -> "RecencyTracker":
        """Rebuild a tracker from a persisted oldest-first sequence."""
        tracker = cls(capacity)
        for symbol in symbols:
            tracker.record_visit(symbol)
        return tracker

    @property
    def capacity(self) -> int:
        return self._capacity

    def record_visit(self, symbol: str) -> None:
        self._symbols = [s for s in self._symbols if s != symbol]
        self._symbols.append(symbol)
        if len(self._symbols) > self._capacity:
            del self._symbols[0]

    def all(self) -> list[str]:
        return self._symbols[::-1]

    def stored(self) -> list[str]:
        """Oldest-first copy, the order used for persistence."""
        return list(self._symbols)

    def clear(self) -> None:
        self._symbols = []

    def __len__(self) -> int:
        return len(self._symbols)
