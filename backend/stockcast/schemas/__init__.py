"""
StockCast Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from stockcast.schemas.market import (
    PriceBar,
    StockSnapshot,
    CompanyInfo,
    DataSource,
)
from stockcast.schemas.indicators import (
    IndicatorSnapshot,
    IndicatorReading,
    TechnicalSignals,
    SignalType,
    TrendDirection,
    MomentumState,
    Recommendation,
)
from stockcast.schemas.forecast import (
    ForecastRequest,
    ForecastRecord,
    ForecastError,
    ForecastErrorKind,
    DailyPrediction,
)

__all__ = [
    # Market
    "PriceBar",
    "StockSnapshot",
    "CompanyInfo",
    "DataSource",
    # Indicators
    "IndicatorSnapshot",
    "IndicatorReading",
    "TechnicalSignals",
    "SignalType",
    "TrendDirection",
    "MomentumState",
    "Recommendation",
    # Forecast
    "ForecastRequest",
    "ForecastRecord",
    "ForecastError",
    "ForecastErrorKind",
    "DailyPrediction",
]
