"""
Domain entities for the watched stock universe.
See docs/CleanArchitecture.md — Phase 1 for the architectural rationale.
Zero external dependencies — pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class StockRecord:
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    history: tuple[float, ...] = field(default_factory=tuple)
    market_cap: float = 0.0


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Recommendation(str, Enum):
    BUY = "Buy"
    HOLD = "Hold"
    SELL = "Sell"


@dataclass(frozen=True)
class ChartPoint:
    label: str
    price: float


@dataclass(frozen=True)
class StockDetail:
    record: StockRecord
    rank: Optional[int]
    recommendation: Recommendation
    in_watchlist: bool
    chart: list[ChartPoint]
    market_cap_display: str
    volume_display: str


@dataclass(frozen=True)
class WatchlistSummary:
    count: int
    total_value: float
    total_change: float
    average_change_percent: float


@dataclass(frozen=True)
class WatchlistView:
    stocks: list[StockRecord]
    summary: WatchlistSummary
