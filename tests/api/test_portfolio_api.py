"""
API tests for the portfolio endpoint.

Tests cover:
- Aggregated positions with live prices
- Unknown prices rendered as null and excluded from the total
- Closed positions omitted
- Cache reuse across requests
"""

import pytest
from fastapi.testclient import TestClient


def _trade(client: TestClient, symbol: str, trade_type: str, quantity: str, price: str) -> None:
    response = client.post(
        "/api/trades",
        json={"symbol": symbol, "quantity": quantity, "price": price, "type": trade_type},
    )
    assert response.status_code == 201, response.text


class TestPortfolioAPI:
    """Tests for GET /api/portfolio."""

    def test_empty_portfolio(self, client: TestClient):
        response = client.get("/api/portfolio")

        assert response.status_code == 200
        assert response.json() == {"positions": [], "total_value": 0.0}

    def test_positions_with_prices(self, client: TestClient):
        """
        GIVEN AAPL bought twice and sold once, MSFT fully closed, and XYZ with no quote
        WHEN I GET /api/portfolio
        THEN AAPL and XYZ are listed, XYZ has null price fields, total covers AAPL only
        """
        _trade(client, "AAPL", "BUY", "10", "180")
        _trade(client, "aapl", "BUY", "5", "190")
        _trade(client, "AAPL", "SELL", "3", "200")
        _trade(client, "MSFT", "BUY", "2", "300")
        _trade(client, "MSFT", "SELL", "2", "310")
        _trade(client, "XYZ", "BUY", "4", "7")

        data = client.get("/api/portfolio").json()

        assert [p["symbol"] for p in data["positions"]] == ["AAPL", "XYZ"]
        aapl, xyz = data["positions"]
        assert aapl["net_quantity"] == pytest.approx(12)
        assert aapl["average_price"] == pytest.approx(190)
        assert aapl["current_price"] == pytest.approx(185.5)
        assert aapl["market_value"] == pytest.approx(2226.0)
        assert xyz["net_quantity"] == pytest.approx(4)
        assert xyz["current_price"] is None
        assert xyz["market_value"] is None
        assert data["total_value"] == pytest.approx(2226.0)

    def test_repeated_requests_reuse_cached_prices(self, client: TestClient, quote_provider):
        _trade(client, "AAPL", "BUY", "1", "180")
        _trade(client, "GOOGL", "BUY", "2", "140")

        first = client.get("/api/portfolio").json()
        second = client.get("/api/portfolio").json()

        assert first == second
        assert sorted(quote_provider.calls) == ["AAPL", "GOOGL"]
