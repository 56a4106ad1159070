"""
Indicator Engine Service

CONTRACT:
    Input:  IndicatorInput (symbol + daily PriceBar history)
    Output: IndicatorSnapshot

RESPONSIBILITIES:
    - Calculate RSI, MACD, SMA, EMA, Bollinger Bands, Stochastic %K
    - Calculate annualized volatility
    - Map every indicator to a BUY / SELL / NEUTRAL signal

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from stockcast.services.indicators.interface import IndicatorInput, IndicatorServiceInterface
from stockcast.services.indicators.service import IndicatorService, get_indicator_service

__all__ = [
    "IndicatorInput",
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
]
