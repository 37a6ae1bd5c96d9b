"""
Port (interface) for repeating timers.
See docs/CleanArchitecture.md — Phase 4 for the architectural rationale.
Infrastructure adapters (e.g. AsyncioScheduler) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Callable


class ICancellationHandle(ABC):
    @abstractmethod
    def cancel(self) -> None:
        """Stop future invocations. Safe to call more than once."""
        ...

    @property
    @abstractmethod
    def cancelled(self) -> bool: ...


class IScheduler(ABC):
    @abstractmethod
    def schedule_repeating(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> ICancellationHandle:
        """Invoke *callback* every *interval_seconds* until the handle is cancelled."""
        ...
