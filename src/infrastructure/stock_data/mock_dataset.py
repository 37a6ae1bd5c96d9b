"""
Infrastructure adapter: bundled mock snapshot → IStockDataset.
See docs/CleanArchitecture.md — Phase 1 for the architectural rationale.
There is no live feed; this fixed ten-record snapshot is the whole universe.
"""

from src.domain.entities.stock_record import StockRecord
from src.domain.ports.stock_dataset_port import IStockDataset

MOCK_STOCKS: tuple[StockRecord, ...] = (
    StockRecord(
        symbol="AAPL",
        name="Apple Inc.",
        price=189.45,
        change=1.23,
        change_percent=0.65,
        volume=52_000_000,
        history=(180, 182, 183, 185, 187, 189, 189.45),
        market_cap=2.97e12,
    ),
    StockRecord(
        symbol="MSFT",
        name="Microsoft Corporation",
        price=428.65,
        change=3.21,
        change_percent=0.75,
        volume=18_500_000,
        history=(415, 418, 420, 423, 426, 428, 428.65),
        market_cap=3.19e12,
    ),
    StockRecord(
        symbol="GOOGL",
        name="Alphabet Inc.",
        price=156.78,
        change=-2.15,
        change_percent=-1.35,
        volume=32_400_000,
        history=(165, 162, 160, 158, 157, 156.8, 156.78),
        market_cap=1.94e12,
    ),
    StockRecord(
        symbol="AMZN",
        name="Amazon.com Inc.",
        price=201.5,
        change=5.4,
        change_percent=2.75,
        volume=48_900_000,
        history=(187, 190, 194, 198, 200, 201, 201.5),
        market_cap=2.07e12,
    ),
    StockRecord(
        symbol="TSLA",
        name="Tesla Inc.",
        price=250.76,
        change=-0.87,
        change_percent=-0.35,
        volume=124_500_000,
        history=(245, 247, 249, 251, 251, 250.8, 250.76),
        market_cap=7.92e11,
    ),
    StockRecord(
        symbol="NVDA",
        name="NVIDIA Corporation",
        price=873.54,
        change=12.45,
        change_percent=1.44,
        volume=41_200_000,
        history=(840, 850, 860, 865, 870, 872, 873.54),
        market_cap=2.14e12,
    ),
    StockRecord(
        symbol="META",
        name="Meta Platforms Inc.",
        price=512.89,
        change=8.76,
        change_percent=1.73,
        volume=15_300_000,
        history=(490, 495, 502, 508, 510, 512, 512.89),
        market_cap=1.31e12,
    ),
    StockRecord(
        symbol="NFLX",
        name="Netflix Inc.",
        price=285.43,
        change=-4.12,
        change_percent=-1.42,
        volume=3_400_000,
        history=(298, 295, 292, 289, 286, 285.5, 285.43),
        market_cap=1.23e11,
    ),
    StockRecord(
        symbol="SPCE",
        name="Virgin Galactic Holdings",
        price=45.82,
        change=2.34,
        change_percent=5.37,
        volume=28_900_000,
        history=(40, 42, 43, 44, 45, 45.5, 45.82),
        market_cap=4.85e9,
    ),
    StockRecord(
        symbol="RIOT",
        name="Riot Blockchain Inc.",
        price=19.65,
        change=-1.23,
        change_percent=-5.88,
        volume=65_200_000,
        history=(25, 23, 21, 20.5, 20, 19.8, 19.65),
        market_cap=2.15e9,
    ),
)


class MockStockDataset(IStockDataset):
    """Serves the bundled snapshot, in dataset order."""

    def load(self) -> list[StockRecord]:
        return list(MOCK_STOCKS)
