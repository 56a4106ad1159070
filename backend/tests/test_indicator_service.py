"""Tests for the indicator engine service."""

import pytest

from stockcast.core.config import ForecastConfig
from stockcast.schemas.indicators import Recommendation, SignalType
from stockcast.services.base import ValidationError
from stockcast.services.indicators import IndicatorInput, IndicatorService


@pytest.fixture
def service():
    return IndicatorService(ForecastConfig())


def test_rising_snapshot(service, rising_bars):
    snapshot = service.calculate_snapshot("aapl", rising_bars)

    assert snapshot.symbol == "AAPL"
    assert snapshot.current_price == 129.0
    assert snapshot.bars_used == 30
    assert snapshot.note is None

    readings = snapshot.indicators
    assert readings["rsi"].value == 100.0
    assert readings["rsi"].signal == SignalType.SELL
    assert readings["macd"].signal == SignalType.BUY
    assert readings["sma20"].value == 119.5
    assert readings["sma20"].signal == SignalType.BUY
    assert snapshot.recommendation == Recommendation.BUY


def test_flat_snapshot(service, flat_bars):
    snapshot = service.calculate_snapshot("AAPL", flat_bars)

    assert snapshot.macd.histogram == 0.0
    assert snapshot.bollinger_bands.upper == snapshot.bollinger_bands.lower == 100.0
    assert snapshot.indicators["bollinger"].value == 50.0
    assert snapshot.indicators["bollinger"].signal == SignalType.NEUTRAL
    assert snapshot.indicators["rsi"].signal == SignalType.NEUTRAL
    assert snapshot.recommendation == Recommendation.HOLD


def test_short_history_uses_fallbacks(service, bars_factory):
    snapshot = service.calculate_snapshot("AAPL", bars_factory([50.0, 51.0, 49.0]))

    assert snapshot.indicators["rsi"].value == 50.0
    assert snapshot.indicators["sma20"].value == 49.0
    assert snapshot.indicators["stochastic"].value == 50.0
    assert snapshot.note is not None


def test_ema_signal_mode(rising_bars):
    approximate = IndicatorService(ForecastConfig()).calculate_snapshot("AAPL", rising_bars)
    true_ema = IndicatorService(ForecastConfig(macd_signal_mode="ema")).calculate_snapshot("AAPL", rising_bars)

    assert approximate.macd.macd_line == true_ema.macd.macd_line
    assert approximate.macd.signal_line != true_ema.macd.signal_line


def test_empty_history_raises(service):
    with pytest.raises(ValidationError):
        service.calculate_snapshot("AAPL", [])


@pytest.mark.asyncio
async def test_execute(service, rising_bars):
    snapshot = await service.execute(IndicatorInput(symbol="AAPL", bars=rising_bars))
    assert snapshot.bars_used == 30
