"""
Port (interface) for stock dataset sources.
See docs/CleanArchitecture.md — Phase 1 for the architectural rationale.
Infrastructure adapters (e.g. MockStockDataset) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.stock_record import StockRecord


class IStockDataset(ABC):
    @abstractmethod
    def load(self) -> list[StockRecord]:
        """Return the full snapshot, in dataset order. Called once per session."""
        ...
