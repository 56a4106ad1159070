"""
Forecast Engine Service

CONTRACT:
    Input:  ForecastInput (symbol + daily PriceBar history)
    Output: ForecastRecord | ForecastError

RESPONSIBILITIES:
    - Fit linear regression on closing prices
    - Run Monte Carlo price simulation
    - Blend both models into a 7-day forecast
    - Attach decaying confidence and a static accuracy score
    - Bundle indicator values, signals and recommendation

Uses NumPy for all math. Only the Monte Carlo step is random,
and its generator is injectable for reproducible runs.
"""

from stockcast.services.forecast.interface import (
    ForecastInput,
    ForecastResult,
    ForecastServiceInterface,
)
from stockcast.services.forecast.service import ForecastService, get_forecast_service

__all__ = [
    "ForecastInput",
    "ForecastResult",
    "ForecastServiceInterface",
    "ForecastService",
    "get_forecast_service",
]
