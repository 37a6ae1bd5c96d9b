"""
Use-case: search and order the stock universe for display.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.
Depends only on Domain structures and entities — no infrastructure imports.
"""

from typing import Iterable, Union

from src.domain.entities.stock_record import StockRecord
from src.domain.structures.sorting import SortAlgorithm, SortField, sort_records
from src.domain.structures.symbol_index import SymbolIndex


def search(records: Iterable[StockRecord], query: str) -> list[StockRecord]:
    """Case-insensitive substring match on symbol or company name.

    A blank query matches everything.
    """
    needle = (query or "").strip().upper()
    if not needle:
        return list(records)
    return [
        record
        for record in records
        if needle in record.symbol.upper() or needle in record.name.upper()
    ]


class ListStocksUseCase:
    def __init__(self, index: SymbolIndex) -> None:
        self._index = index

    def execute(
        self,
        query: str = "",
        sort_by: Union[SortField, str] = SortField.SYMBOL,
        ascending: bool = True,
        algorithm: Union[SortAlgorithm, str] = SortAlgorithm.MERGE,
    ) -> list[StockRecord]:
        """Filter the indexed records by *query*, then order them.

        Args:
            query:     Free text matched against symbol and name (case-insensitive).
            sort_by:   Record field to order by (e.g. 'symbol', 'price', 'change_percent').
            ascending: Direction of the ordering.
            algorithm: 'merge' (stable, default) or 'quick'.

        Raises:
            ValueError: if *sort_by* or *algorithm* is unknown.
        """
        return sort_records(search(self._index.all(), query), sort_by, ascending, algorithm)

    def total(self) -> int:
        return len(self._index)
