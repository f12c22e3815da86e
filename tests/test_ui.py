"""Tests for the journal web view."""

import asyncio

from aiohttp import test_utils

from tradejournal import Trade, TradeStore, create_journal_app
from tradejournal.journal.table_ui import journal_rows, journal_stats


def run_with_client(store, scenario):
    """Run ``scenario(client)`` against an app serving ``store``."""

    async def runner():
        async with test_utils.TestClient(test_utils.TestServer(create_journal_app(store))) as client:
            return await scenario(client)

    return asyncio.run(runner())


def seeded_store():
    store = TradeStore()
    store.add_trade(Trade(ticker="aapl", tvh=100.0, sl=95.0))
    store.add_trade(Trade(ticker="msft", tvh=100.0, sl=85.0))
    return store


class TestRows:
    """Tests for the row and stats helpers."""

    def test_rows_carry_positions(self):
        rows = journal_rows(seeded_store())
        assert [r["index"] for r in rows] == [0, 1]
        assert [r["ticker"] for r in rows] == ["AAPL", "MSFT"]
        assert [r["color"] for r in rows] == ["yellow", "red"]

    def test_stats(self):
        assert journal_stats(seeded_store()) == {"trades": 2, "total_risk": "20.00%"}

    def test_stats_empty(self):
        assert journal_stats(TradeStore()) == {"trades": 0, "total_risk": "0.00%"}


class TestJournalApp:
    """Tests for the HTTP routes."""

    def test_index_page(self):
        async def scenario(client):
            resp = await client.get("/")
            assert resp.status == 200
            text = await resp.text()
            assert "<table>" in text
            assert "add-form" in text

        run_with_client(TradeStore(), scenario)

    def test_list_trades(self):
        async def scenario(client):
            resp = await client.get("/api/trades")
            assert resp.status == 200
            return await resp.json()

        rows = run_with_client(seeded_store(), scenario)
        assert len(rows) == 2
        assert rows[0]["ticker"] == "AAPL"
        assert rows[0]["risk"] == 5.0
        assert rows[0]["risk_level"] == "MEDIUM"
        assert rows[1]["risk_level"] == "HIGH"

    def test_infinite_risk_sent_as_null(self):
        store = TradeStore()
        store.add_trade(Trade(ticker="ZERO", tvh=0.0, sl=1.0))

        async def scenario(client):
            resp = await client.get("/api/trades")
            return await resp.json()

        rows = run_with_client(store, scenario)
        assert rows[0]["risk"] is None
        assert rows[0]["color"] == "red"

    def test_stats_route(self):
        async def scenario(client):
            resp = await client.get("/api/stats")
            return await resp.json()

        assert run_with_client(seeded_store(), scenario) == {"trades": 2, "total_risk": "20.00%"}

    def test_add_trade(self):
        store = TradeStore()

        async def scenario(client):
            resp = await client.post("/api/trades", json={"ticker": "nvda", "tvh": "880", "sl": "700"})
            assert resp.status == 201
            return await resp.json()

        row = run_with_client(store, scenario)
        assert row["ticker"] == "NVDA"
        assert row["index"] == 0
        assert row["risk"] == 20.45
        assert len(store) == 1
        assert store[0].ticker == "NVDA"

    def test_add_blank_ticker_defaults(self):
        store = TradeStore()

        async def scenario(client):
            resp = await client.post("/api/trades", json={"ticker": "", "tvh": "250", "sl": "230"})
            return await resp.json()

        row = run_with_client(store, scenario)
        assert row["ticker"] == "HDFS1000"

    def test_add_null_ticker_defaults(self):
        store = TradeStore()

        async def scenario(client):
            resp = await client.post("/api/trades", json={"ticker": None, "tvh": "100", "sl": "95"})
            assert resp.status == 201
            return await resp.json()

        row = run_with_client(store, scenario)
        assert row["ticker"] == "HDFS1000"
        assert store[0].ticker == "HDFS1000"

    def test_add_missing_ticker_defaults(self):
        store = TradeStore()

        async def scenario(client):
            resp = await client.post("/api/trades", json={"tvh": "100", "sl": "95"})
            return resp.status

        assert run_with_client(store, scenario) == 201
        assert store[0].ticker == "HDFS1000"

    def test_add_non_string_fields_rejected(self):
        store = TradeStore()

        async def scenario(client):
            statuses = []
            for body in (
                {"ticker": "aapl", "tvh": 100, "sl": "95"},
                {"ticker": "aapl", "tvh": "100", "sl": [95]},
                {"ticker": 42, "tvh": "100", "sl": "95"},
            ):
                resp = await client.post("/api/trades", json=body)
                statuses.append((resp.status, (await resp.json())["field"]))
            return statuses

        assert run_with_client(store, scenario) == [(400, "tvh"), (400, "sl"), (400, "ticker")]
        assert len(store) == 0

    def test_add_null_price_is_required(self):
        store = TradeStore()

        async def scenario(client):
            resp = await client.post("/api/trades", json={"ticker": "aapl", "tvh": None, "sl": "95"})
            assert resp.status == 400
            return await resp.json()

        assert run_with_client(store, scenario)["field"] == "tvh"
        assert len(store) == 0

    def test_add_invalid_entry(self):
        store = seeded_store()

        async def scenario(client):
            resp = await client.post("/api/trades", json={"ticker": "x", "tvh": "abc", "sl": "1"})
            assert resp.status == 400
            return await resp.json()

        body = run_with_client(store, scenario)
        assert body["field"] == "tvh"
        assert len(store) == 2

    def test_add_malformed_body(self):
        store = TradeStore()

        async def scenario(client):
            resp = await client.post("/api/trades", data="not json")
            return resp.status

        assert run_with_client(store, scenario) == 400
        assert len(store) == 0

    def test_delete_trades(self):
        store = seeded_store()
        store.add_trade(Trade(ticker="tsla", tvh=200.0, sl=190.0))

        async def scenario(client):
            resp = await client.delete("/api/trades", json={"indices": [0, 2]})
            assert resp.status == 200
            return await resp.json()

        assert run_with_client(store, scenario) == {"deleted": 2}
        assert [t.ticker for t in store] == ["MSFT"]

    def test_delete_out_of_range(self):
        store = seeded_store()

        async def scenario(client):
            resp = await client.delete("/api/trades", json={"indices": [1, 7]})
            return resp.status

        assert run_with_client(store, scenario) == 400
        assert len(store) == 2

    def test_delete_bad_indices(self):
        store = seeded_store()

        async def scenario(client):
            resp = await client.delete("/api/trades", json={"indices": ["0"]})
            return resp.status

        assert run_with_client(store, scenario) == 400
        assert len(store) == 2
