"""
Symbol-keyed lookup table over a dataset snapshot.
See docs/CleanArchitecture.md — Phase 2 for the architectural rationale.

Built once from the dataset and never mutated; rebuild it wholesale when the
snapshot changes. A later record with an already-indexed symbol replaces the
earlier one (last write wins) but keeps the earlier record's position.
"""

from typing import Iterable, Iterator, Optional

from src.domain.entities.stock_record import StockRecord


class SymbolIndex:
    def __init__(self) -> None:
        self._records: dict[str, StockRecord] = {}

    @classmethod
    def build(cls, records: Iterable[StockRecord]) -> "SymbolIndex":
        index = cls()
        for record in records:
            index._records[record.symbol] = record
        return index

    def get(self, symbol: str) -> Optional[StockRecord]:
        return self._records.get(symbol)

    def contains(self, symbol: str) -> bool:
        return symbol in self._records

    def all(self) -> list[StockRecord]:
        """Every indexed record, in the order symbols were first inserted."""
        return list(self._records.values())

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._records

    def __iter__(self) -> Iterator[StockRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)
