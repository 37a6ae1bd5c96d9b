"""
Use-cases: read and edit the persisted watchlist.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.
Depends only on Domain structures and application services — no infrastructure imports.
"""

from typing import Union

from src.application.services import stock_insights
from src.application.services.preferences_service import PreferencesService
from src.application.use_cases.list_stocks import search
from src.domain.entities.stock_record import WatchlistView
from src.domain.structures.sorting import SortField, merge_sort
from src.domain.structures.symbol_index import SymbolIndex


def _normalize(symbol: str) -> str:
    if not symbol or not symbol.strip():
        raise ValueError("symbol must be a non-empty string")
    return symbol.upper().strip()


class GetWatchlistUseCase:
    def __init__(self, index: SymbolIndex, preferences: PreferencesService) -> None:
        self._index = index
        self._preferences = preferences

    def execute(
        self,
        query: str = "",
        sort_by: Union[SortField, str] = SortField.SYMBOL,
        ascending: bool = True,
    ) -> WatchlistView:
        """Resolve watched symbols to records, then filter, order and summarize them.

        Symbols no longer present in the dataset are skipped. The summary
        covers the filtered records only.

        Raises:
            ValueError: if *sort_by* is unknown.
        """
        watched = [self._index.get(symbol) for symbol in self._preferences.get_watchlist()]
        records = [record for record in watched if record is not None]
        ordered = merge_sort(search(records, query), sort_by, ascending)
        return WatchlistView(stocks=ordered, summary=stock_insights.summarize(ordered))


class AddToWatchlistUseCase:
    def __init__(self, preferences: PreferencesService) -> None:
        self._preferences = preferences

    def execute(self, symbol: str) -> list[str]:
        """Add *symbol* (uppercased) and return the resulting watchlist.

        Raises:
            ValueError: if *symbol* is blank.
        """
        self._preferences.add_to_watchlist(_normalize(symbol))
        return self._preferences.get_watchlist()


class RemoveFromWatchlistUseCase:
    def __init__(self, preferences: PreferencesService) -> None:
        self._preferences = preferences

    def execute(self, symbol: str) -> list[str]:
        """Remove *symbol* (uppercased) and return the resulting watchlist.

        Raises:
            ValueError: if *symbol* is blank.
        """
        self._preferences.remove_from_watchlist(_normalize(symbol))
        return self._preferences.get_watchlist()
