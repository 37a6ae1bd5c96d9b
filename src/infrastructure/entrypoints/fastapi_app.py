"""
FastAPI entry point — the dashboard's HTTP surface.
See docs/CleanArchitecture.md — Phase 5 for the architectural rationale.

This module is the Composition Root: it wires the dataset, key-value store and
scheduler adapters into the application layer. The Top Picks rotation is
started when the app starts and cancelled when it shuts down.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Literal, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.application.services.preferences_service import PreferencesService
from src.application.services.top_picks_rotator import TopPicksRotator
from src.application.use_cases.get_recently_viewed import GetRecentlyViewedUseCase
from src.application.use_cases.get_stock_detail import GetStockDetailUseCase
from src.application.use_cases.list_stocks import ListStocksUseCase
from src.application.use_cases.manage_watchlist import (
    AddToWatchlistUseCase,
    GetWatchlistUseCase,
    RemoveFromWatchlistUseCase,
)
from src.domain.entities.stock_record import StockRecord, Theme
from src.domain.ports.key_value_store_port import IKeyValueStore
from src.domain.ports.scheduler_port import IScheduler
from src.domain.ports.stock_dataset_port import IStockDataset
from src.domain.structures.rotation_queue import TopPicksQueue
from src.domain.structures.sorting import SortAlgorithm, SortField
from src.domain.structures.symbol_index import SymbolIndex
from src.infrastructure.config.settings import Settings, load_settings
from src.infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler
from src.infrastructure.stock_data.mock_dataset import MockStockDataset
from src.infrastructure.storage.in_memory_store import InMemoryKeyValueStore
from src.infrastructure.storage.json_file_store import JsonFileKeyValueStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Response / request models
# ---------------------------------------------------------------------------
class StockOut(BaseModel):
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    history: list[float]
    market_cap: float

    @classmethod
    def of(cls, record: StockRecord) -> "StockOut":
        return cls(
            symbol=record.symbol,
            name=record.name,
            price=record.price,
            change=record.change,
            change_percent=record.change_percent,
            volume=record.volume,
            history=list(record.history),
            market_cap=record.market_cap,
        )


class StockListOut(BaseModel):
    total: int
    count: int
    stocks: list[StockOut]


class ChartPointOut(BaseModel):
    label: str
    price: float


class StockDetailOut(BaseModel):
    stock: StockOut
    rank: Optional[int]
    recommendation: str
    in_watchlist: bool
    chart: list[ChartPointOut]
    market_cap_display: str
    volume_display: str


class TopPicksOut(BaseModel):
    featured: Optional[str]
    picks: list[StockOut]


class WatchlistSummaryOut(BaseModel):
    count: int
    total_value: float
    total_change: float
    average_change_percent: float


class WatchlistOut(BaseModel):
    symbols: list[str]
    stocks: list[StockOut]
    summary: WatchlistSummaryOut


class SymbolsOut(BaseModel):
    symbols: list[str]


class ThemeIn(BaseModel):
    theme: Theme


class ThemeOut(BaseModel):
    theme: Theme


SortOrder = Literal["asc", "desc"]


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    dataset: IStockDataset,
    store: IKeyValueStore,
    scheduler: IScheduler,
    rotation_seconds: float = TopPicksRotator.ROTATION_INTERVAL_SECONDS,
    top_picks_size: int = 5,
    recent_capacity: int = 5,
) -> FastAPI:
    """Wire every adapter once and return the configured FastAPI app."""
    records = dataset.load()
    index = SymbolIndex.build(records)
    preferences = PreferencesService(store, recent_capacity=recent_capacity)
    rotator = TopPicksRotator(
        TopPicksQueue.build(index.all(), size=top_picks_size),
        scheduler,
        interval_seconds=rotation_seconds,
    )

    list_uc = ListStocksUseCase(index)
    detail_uc = GetStockDetailUseCase(index, preferences)
    watchlist_uc = GetWatchlistUseCase(index, preferences)
    add_uc = AddToWatchlistUseCase(preferences)
    remove_uc = RemoveFromWatchlistUseCase(preferences)
    recent_uc = GetRecentlyViewedUseCase(index, preferences)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        rotator.start()
        try:
            yield
        finally:
            rotator.stop()

    app = FastAPI(title="StockWatch Dashboard API", lifespan=lifespan)
    app.state.rotator = rotator
    logger.info("Indexed %d stocks", len(index))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/stocks", response_model=StockListOut)
    async def list_stocks(
        q: str = "",
        sort_by: SortField = SortField.SYMBOL,
        order: SortOrder = "asc",
        algorithm: SortAlgorithm = SortAlgorithm.MERGE,
    ):
        stocks = list_uc.execute(q, sort_by, order == "asc", algorithm)
        return StockListOut(
            total=list_uc.total(),
            count=len(stocks),
            stocks=[StockOut.of(record) for record in stocks],
        )

    @app.get("/stocks/{symbol}", response_model=StockDetailOut)
    async def get_stock(symbol: str):
        detail = detail_uc.execute(symbol)
        if detail is None:
            raise HTTPException(status_code=404, detail=f"Unknown symbol: {symbol!r}")
        return StockDetailOut(
            stock=StockOut.of(detail.record),
            rank=detail.rank,
            recommendation=detail.recommendation.value,
            in_watchlist=detail.in_watchlist,
            chart=[ChartPointOut(label=p.label, price=p.price) for p in detail.chart],
            market_cap_display=detail.market_cap_display,
            volume_display=detail.volume_display,
        )

    @app.get("/top-picks", response_model=TopPicksOut)
    async def top_picks():
        featured = rotator.featured()
        return TopPicksOut(
            featured=featured.symbol if featured else None,
            picks=[StockOut.of(record) for record in rotator.picks()],
        )

    @app.get("/watchlist", response_model=WatchlistOut)
    async def get_watchlist(
        q: str = "",
        sort_by: SortField = SortField.SYMBOL,
        order: SortOrder = "asc",
    ):
        view = watchlist_uc.execute(q, sort_by, order == "asc")
        summary = view.summary
        return WatchlistOut(
            symbols=preferences.get_watchlist(),
            stocks=[StockOut.of(record) for record in view.stocks],
            summary=WatchlistSummaryOut(
                count=summary.count,
                total_value=summary.total_value,
                total_change=summary.total_change,
                average_change_percent=summary.average_change_percent,
            ),
        )

    @app.put("/watchlist/{symbol}", response_model=SymbolsOut)
    async def add_to_watchlist(symbol: str):
        return SymbolsOut(symbols=add_uc.execute(symbol))

    @app.delete("/watchlist/{symbol}", response_model=SymbolsOut)
    async def remove_from_watchlist(symbol: str):
        return SymbolsOut(symbols=remove_uc.execute(symbol))

    @app.get("/recently-viewed", response_model=list[StockOut])
    async def recently_viewed():
        return [StockOut.of(record) for record in recent_uc.execute()]

    @app.delete("/recently-viewed", status_code=204)
    async def clear_recently_viewed():
        preferences.clear_recently_viewed()

    @app.get("/theme", response_model=ThemeOut)
    async def get_theme():
        return ThemeOut(theme=preferences.get_theme())

    @app.put("/theme", response_model=ThemeOut)
    async def set_theme(body: ThemeIn):
        preferences.set_theme(body.theme)
        return ThemeOut(theme=body.theme)

    @app.post("/theme/toggle", response_model=ThemeOut)
    async def toggle_theme():
        return ThemeOut(theme=preferences.toggle_theme())

    return app


def build_store(settings: Settings) -> IKeyValueStore:
    if settings.state_path is None:
        logger.info("No state path configured; preferences are kept in memory")
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore(settings.state_path)


def build_default_app(settings: Settings) -> FastAPI:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return create_app(
        dataset=MockStockDataset(),
        store=build_store(settings),
        scheduler=AsyncioScheduler(),
        rotation_seconds=settings.rotation_seconds,
        top_picks_size=settings.top_picks_size,
        recent_capacity=settings.recent_capacity,
    )


# ---------------------------------------------------------------------------
# Composition Root — wire all dependencies once at startup
# ---------------------------------------------------------------------------
app = build_default_app(load_settings())
