"""Tests for settings and forecast configuration."""

import pytest
from pydantic import ValidationError

from stockcast.core.config import ForecastConfig, Settings


def test_defaults():
    config = ForecastConfig.from_settings(Settings())

    assert config.min_history == 10
    assert config.simulations == 1000
    assert config.linear_weight == 0.6
    assert config.monte_carlo_weight == 0.4
    assert config.macd_signal_mode == "approximate"
    assert config.seed is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FORECAST_SEED", "99")
    monkeypatch.setenv("MONTE_CARLO_SIMULATIONS", "500")
    monkeypatch.setenv("MACD_SIGNAL_MODE", "ema")

    config = ForecastConfig.from_settings(Settings())

    assert config.seed == 99
    assert config.simulations == 500
    assert config.macd_signal_mode == "ema"


def test_horizon_is_not_configurable(monkeypatch):
    monkeypatch.setenv("FORECAST_HORIZON_DAYS", "3")

    assert not hasattr(Settings(), "forecast_horizon_days")
    with pytest.raises(TypeError):
        ForecastConfig(horizon_days=3)


class TestSettingsValidation:
    @pytest.mark.parametrize(
        "name,value",
        [
            ("MONTE_CARLO_SIMULATIONS", "0"),
            ("MONTE_CARLO_SIMULATIONS", "-5"),
            ("FORECAST_MIN_HISTORY", "0"),
            ("FORECAST_MIN_HISTORY", "9"),
            ("LINEAR_WEIGHT", "-0.1"),
            ("MONTE_CARLO_WEIGHT", "-1"),
            ("MACD_SIGNAL_MODE", "wilder"),
        ],
    )
    def test_rejects_out_of_range_env(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings()

    def test_accepts_longer_min_history(self, monkeypatch):
        monkeypatch.setenv("FORECAST_MIN_HISTORY", "30")
        assert Settings().forecast_min_history == 30


class TestForecastConfigValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"simulations": 0},
            {"min_history": 0},
            {"min_history": 9},
            {"linear_weight": -0.5},
            {"monte_carlo_weight": -0.5},
            {"macd_signal_mode": "wilder"},
        ],
    )
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            ForecastConfig(**kwargs)
