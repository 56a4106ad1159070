"""Pytest configuration and shared fixtures for the StockCast test suite."""

from datetime import date, timedelta

import pytest

from stockcast.schemas.market import PriceBar


def make_bars(closes, start=date(2024, 1, 1)):
    """Build daily PriceBars around the given closes, one calendar day apart."""
    return [
        PriceBar(
            date=start + timedelta(days=i),
            open=close,
            high=close * 1.01,
            low=close * 0.99,
            close=close,
            volume=1_000_000,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def rising_closes():
    """30 closes from 100.00 to 129.00, +1.00 per day."""
    return [100.0 + i for i in range(30)]


@pytest.fixture
def flat_closes():
    """30 closes all at 100.00."""
    return [100.0] * 30


@pytest.fixture
def rising_bars(rising_closes):
    return make_bars(rising_closes)


@pytest.fixture
def flat_bars(flat_closes):
    return make_bars(flat_closes)


@pytest.fixture
def bars_factory():
    """Factory fixture: closes -> list[PriceBar]."""
    return make_bars
