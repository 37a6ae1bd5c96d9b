"""
Use-case: resolve the recently-viewed history to stock records.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.
"""

from src.application.services.preferences_service import PreferencesService
from src.domain.entities.stock_record import StockRecord
from src.domain.structures.symbol_index import SymbolIndex


class GetRecentlyViewedUseCase:
    def __init__(self, index: SymbolIndex, preferences: PreferencesService) -> None:
        self._index = index
        self._preferences = preferences

    def execute(self) -> list[StockRecord]:
        """Most recent first; symbols missing from the dataset are skipped."""
        records = [self._index.get(symbol) for symbol in self._preferences.get_recently_viewed()]
        return [record for record in records if record is not None]
