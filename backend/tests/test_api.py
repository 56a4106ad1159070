"""Tests for the HTTP API."""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from stockcast.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def _history(closes, start=date(2024, 1, 1)):
    return [
        {
            "date": (start + timedelta(days=i)).isoformat(),
            "open": close,
            "high": close + 1,
            "low": max(close - 1, 0),
            "close": close,
            "volume": 1_500_000,
        }
        for i, close in enumerate(closes)
    ]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


class TestStockEndpoint:
    def test_returns_mock_snapshot(self, client):
        response = client.get("/api/v1/stock/aapl")
        assert response.status_code == 200

        body = response.json()
        assert body["symbol"] == "AAPL"
        assert body["data_source"] == "mock_data"
        assert body["company_info"]["name"] == "Apple Inc."
        assert len(body["historical_data"]) == 31

    def test_invalid_symbol(self, client):
        response = client.get("/api/v1/stock/TOOLONGSYMBOL")
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "INVALID_SYMBOL"


class TestPredictEndpoint:
    def test_forecast(self, client):
        closes = [100.0 + i for i in range(30)]
        response = client.post("/api/v1/stock/aapl/predict", json={"historical_data": _history(closes)})
        assert response.status_code == 200

        body = response.json()
        assert body["symbol"] == "AAPL"
        assert len(body["predictions"]) == 7
        assert body["recommendation"] == "BUY"
        assert body["signals"]["trend"] == "BULLISH"
        assert body["algorithm_label"] == "Ensemble (Linear Regression + Monte Carlo)"

        first = body["predictions"][0]
        assert first["date"] == (date.today() + timedelta(days=1)).isoformat()
        assert 50 <= first["confidence_percent"] <= 85

    def test_insufficient_data(self, client):
        closes = [100.0 + i for i in range(9)]
        response = client.post("/api/v1/stock/aapl/predict", json={"historical_data": _history(closes)})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "INSUFFICIENT_DATA"

    def test_invalid_symbol(self, client):
        closes = [100.0 + i for i in range(12)]
        response = client.post("/api/v1/stock/bad1/predict", json={"historical_data": _history(closes)})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "INVALID_SYMBOL"

    def test_negative_close_rejected_by_schema(self, client):
        history = _history([100.0] * 12)
        history[3]["close"] = -5
        response = client.post("/api/v1/stock/aapl/predict", json={"historical_data": history})
        assert response.status_code == 422

    def test_missing_body(self, client):
        response = client.post("/api/v1/stock/aapl/predict", json={})
        assert response.status_code == 422


class TestIndicatorsEndpoint:
    def test_readings(self, client):
        response = client.get("/api/v1/stock/msft/indicators")
        assert response.status_code == 200

        body = response.json()
        assert body["symbol"] == "MSFT"
        assert set(body["indicators"]) == {"rsi", "macd", "sma20", "bollinger", "stochastic"}
        for reading in body["indicators"].values():
            assert reading["signal"] in {"BUY", "SELL", "NEUTRAL"}
        assert body["recommendation"] in {"BUY", "SELL", "HOLD"}
        assert body["bars_used"] == 31

    def test_invalid_symbol(self, client):
        response = client.get("/api/v1/stock/1234/indicators")
        assert response.status_code == 400
