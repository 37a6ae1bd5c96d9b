"""
Derived, display-oriented facts about stock records.
See docs/CleanArchitecture.md — Phase 3 for the architectural rationale.
"""

from typing import Optional, Sequence

from src.domain.entities.stock_record import (
    ChartPoint,
    Recommendation,
    StockRecord,
    WatchlistSummary,
)
from src.domain.structures.sorting import SortField, merge_sort

BUY_THRESHOLD = 2.0
SELL_THRESHOLD = -2.0


def recommend(record: StockRecord) -> Recommendation:
    if record.change_percent > BUY_THRESHOLD:
        return Recommendation.BUY
    if record.change_percent < SELL_THRESHOLD:
        return Recommendation.SELL
    return Recommendation.HOLD


def performance_rank(records: Sequence[StockRecord], symbol: str) -> Optional[int]:
    """1-based position of *symbol* when ranked by change_percent, best first."""
    ranked = merge_sort(records, SortField.CHANGE_PERCENT, ascending=False)
    for position, record in enumerate(ranked, start=1):
        if record.symbol == symbol:
            return position
    return None


def chart_points(record: StockRecord) -> list[ChartPoint]:
    return [
        ChartPoint(label=f"D{day}", price=price)
        for day, price in enumerate(record.history, start=1)
    ]


def format_market_cap(market_cap: float) -> str:
    if market_cap >= 1e12:
        return f"${market_cap / 1e12:.2f}T"
    if market_cap >= 1e9:
        return f"${market_cap / 1e9:.2f}B"
    return f"${market_cap / 1e6:.2f}M"


def format_volume(volume: int) -> str:
    return f"{volume / 1e6:.1f}M"


def summarize(records: Sequence[StockRecord]) -> WatchlistSummary:
    count = len(records)
    total_value = sum(record.price for record in records)
    total_change = sum(record.change for record in records)
    average = sum(record.change_percent for record in records) / count if count else 0.0
    return WatchlistSummary(
        count=count,
        total_value=round(total_value, 4),
        total_change=round(total_change, 4),
        average_change_percent=round(average, 4),
    )
