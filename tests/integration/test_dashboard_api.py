"""End-to-end tests of the HTTP surface wired with test adapters."""

import pytest
from fastapi.testclient import TestClient

from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.fastapi_app import build_store, create_app
from src.infrastructure.stock_data.mock_dataset import MockStockDataset
from src.infrastructure.storage.in_memory_store import InMemoryKeyValueStore
from src.infrastructure.storage.json_file_store import JsonFileKeyValueStore


@pytest.fixture
def client(store, scheduler):
    app = create_app(MockStockDataset(), store, scheduler)
    with TestClient(app) as test_client:
        yield test_client


def symbols(stocks):
    return [s["symbol"] for s in stocks]


class TestStocksEndpoints:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_list_defaults(self, client):
        body = client.get("/stocks").json()
        assert body["total"] == 10
        assert body["count"] == 10
        assert symbols(body["stocks"])[0] == "AAPL"

    def test_search_and_sort(self, client):
        body = client.get(
            "/stocks", params={"q": "corporation", "sort_by": "price", "order": "desc"}
        ).json()
        assert symbols(body["stocks"]) == ["NVDA", "MSFT"]
        assert body["total"] == 10

    def test_empty_search_result_is_not_an_error(self, client):
        response = client.get("/stocks", params={"q": "nothing-matches"})
        assert response.status_code == 200
        assert response.json()["stocks"] == []

    def test_invalid_sort_field(self, client):
        assert client.get("/stocks", params={"sort_by": "dividend"}).status_code == 422

    def test_detail_records_visit(self, client):
        detail = client.get("/stocks/spce").json()
        assert detail["stock"]["symbol"] == "SPCE"
        assert detail["rank"] == 1
        assert detail["recommendation"] == "Buy"
        assert detail["chart"][0] == {"label": "D1", "price": 40.0}

        recent = client.get("/recently-viewed").json()
        assert symbols(recent) == ["SPCE"]

    def test_unknown_detail_is_404(self, client):
        assert client.get("/stocks/ZZZZ").status_code == 404
        assert client.get("/recently-viewed").json() == []


class TestTopPicksEndpoint:
    def test_rotation_follows_scheduler_ticks(self, client, scheduler):
        first = client.get("/top-picks").json()
        assert first["featured"] == "SPCE"

        scheduler.tick()
        second = client.get("/top-picks").json()
        assert second["featured"] == "AMZN"
        assert symbols(second["picks"]) == ["AMZN", "META", "NVDA", "MSFT", "SPCE"]

    def test_rotation_cancelled_on_shutdown(self, store, scheduler):
        app = create_app(MockStockDataset(), store, scheduler)
        with TestClient(app):
            assert scheduler.active_jobs == 1
        assert scheduler.active_jobs == 0


class TestWatchlistEndpoints:
    def test_add_then_remove_restores_state(self, client, store):
        client.put("/watchlist/AAPL")
        before = store.snapshot()

        assert client.put("/watchlist/tsla").json() == {"symbols": ["AAPL", "TSLA"]}
        assert client.delete("/watchlist/TSLA").json() == {"symbols": ["AAPL"]}

        assert store.snapshot() == before

    def test_view_with_summary(self, client):
        client.put("/watchlist/AAPL")
        client.put("/watchlist/MSFT")
        body = client.get("/watchlist", params={"sort_by": "price", "order": "desc"}).json()

        assert symbols(body["stocks"]) == ["MSFT", "AAPL"]
        assert body["symbols"] == ["AAPL", "MSFT"]
        assert body["summary"]["count"] == 2
        assert body["summary"]["total_value"] == pytest.approx(618.1)

    def test_detail_reports_membership(self, client):
        client.put("/watchlist/META")
        assert client.get("/stocks/META").json()["in_watchlist"] is True


class TestPreferenceEndpoints:
    def test_recently_viewed_clear(self, client):
        client.get("/stocks/AAPL")
        client.get("/stocks/MSFT")
        assert symbols(client.get("/recently-viewed").json()) == ["MSFT", "AAPL"]

        assert client.delete("/recently-viewed").status_code == 204
        assert client.get("/recently-viewed").json() == []

    def test_theme_defaults_to_dark(self, client):
        assert client.get("/theme").json() == {"theme": "dark"}

    def test_set_and_toggle_theme(self, client):
        assert client.put("/theme", json={"theme": "light"}).json() == {"theme": "light"}
        assert client.post("/theme/toggle").json() == {"theme": "dark"}

    def test_invalid_theme_rejected(self, client):
        assert client.put("/theme", json={"theme": "blue"}).status_code == 422


def settings_with(state_path):
    return Settings(
        state_path=state_path,
        rotation_seconds=5.0,
        top_picks_size=5,
        recent_capacity=5,
        log_level="INFO",
    )


class TestStateFile:
    def test_undecodable_state_file_does_not_block_routes(self, tmp_path, scheduler):
        path = tmp_path / "state.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        app = create_app(MockStockDataset(), JsonFileKeyValueStore(path), scheduler)

        with TestClient(app) as client:
            assert client.get("/theme").json() == {"theme": "dark"}
            assert client.get("/watchlist").json()["symbols"] == []
            assert client.get("/stocks/AAPL").status_code == 200
            assert client.put("/theme", json={"theme": "light"}).status_code == 200
            assert client.get("/theme").json() == {"theme": "light"}

    def test_build_store_uses_state_file_when_configured(self, tmp_path):
        store = build_store(settings_with(str(tmp_path / "state.json")))
        assert isinstance(store, JsonFileKeyValueStore)

    def test_build_store_without_state_path_is_in_memory(self):
        assert isinstance(build_store(settings_with(None)), InMemoryKeyValueStore)
