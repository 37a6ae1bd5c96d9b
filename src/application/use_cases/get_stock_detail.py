"""
Use-case: open a stock's detail view.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.
Depends only on Domain structures and application services — no infrastructure imports.

Opening a detail view counts as a visit and is written to the recently-viewed
history. Unknown symbols produce None and leave the history untouched.
"""

from typing import Optional

from src.application.services import stock_insights
from src.application.services.preferences_service import PreferencesService
from src.domain.entities.stock_record import StockDetail
from src.domain.structures.symbol_index import SymbolIndex


class GetStockDetailUseCase:
    def __init__(self, index: SymbolIndex, preferences: PreferencesService) -> None:
        self._index = index
        self._preferences = preferences

    def execute(self, symbol: str) -> Optional[StockDetail]:
        """Look up *symbol* (uppercased) and record the visit.

        Raises:
            ValueError: if *symbol* is blank.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        symbol = symbol.upper().strip()

        record = self._index.get(symbol)
        if record is None:
            return None

        self._preferences.add_to_recently_viewed(symbol)
        return StockDetail(
            record=record,
            rank=stock_insights.performance_rank(self._index.all(), symbol),
            recommendation=stock_insights.recommend(record),
            in_watchlist=self._preferences.is_in_watchlist(symbol),
            chart=stock_insights.chart_points(record),
            market_cap_display=stock_insights.format_market_cap(record.market_cap),
            volume_display=stock_insights.format_volume(record.volume),
        )
