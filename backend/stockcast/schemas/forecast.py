"""
CONTRACT 3: Forecast Engine

Input: ForecastRequest (symbol + daily PriceBar history)
Output: ForecastRecord | ForecastError

7-day price forecast from an ensemble of linear regression and
Monte Carlo simulation, with decaying confidence and a BUY/SELL/HOLD
recommendation. Forecasts are recomputed per request and never stored.
"""

import datetime as dt
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from stockcast.schemas.market import PriceBar, SYMBOL_PATTERN
from stockcast.schemas.indicators import Recommendation, TechnicalSignals


ALGORITHM_LABEL = "Ensemble (Linear Regression + Monte Carlo)"
FORECAST_HORIZON_DAYS = 7


# =============================================================================
# ENUMS
# =============================================================================


class ForecastErrorKind(str, Enum):
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"  # Fewer than the minimum closes
    DEGENERATE_INPUT = "DEGENERATE_INPUT"  # All-zero prices, flat fallback used
    INVALID_SYMBOL = "INVALID_SYMBOL"


# =============================================================================
# INPUT: ForecastRequest
# =============================================================================


class ForecastRequest(BaseModel):
    """
    Request body for a forecast.
    Sent by: frontend prediction card
    Received by: Forecast Service
    """

    historical_data: list[PriceBar] = Field(
        ...,
        description="Daily bars in chronological order (oldest first)",
    )


# =============================================================================
# OUTPUT: Forecast Components
# =============================================================================


class DailyPrediction(BaseModel):
    """Predicted close for one future day."""

    date: dt.date
    predicted_price: float = Field(..., ge=0)
    confidence_percent: float = Field(..., ge=50, le=85)


class ForecastIndicators(BaseModel):
    """Indicator values the forecast was based on."""

    sma20: float = Field(..., description="SMA(20); the latest close when fewer than 20 bars")
    sma50: float = Field(..., description="SMA(50); the latest close when fewer than 50 bars")
    rsi: float = Field(..., ge=0, le=100)
    volatility_percent: float = Field(..., ge=0, description="Annualized, in %")


class ForecastError(BaseModel):
    """Structured validation failure returned instead of a forecast."""

    kind: ForecastErrorKind
    message: str
    symbol: Optional[str] = None


# =============================================================================
# OUTPUT: ForecastRecord (Complete Response)
# =============================================================================


class ForecastRecord(BaseModel):
    """
    Complete forecast for a symbol.
    Returned by: Forecast Service
    Consumed by: frontend prediction chart and recommendation card
    """

    symbol: str = Field(..., pattern=SYMBOL_PATTERN)
    predictions: list[DailyPrediction] = Field(
        ..., min_length=FORECAST_HORIZON_DAYS, max_length=FORECAST_HORIZON_DAYS
    )
    technical_indicators: ForecastIndicators
    signals: TechnicalSignals
    recommendation: Recommendation
    accuracy_percent: float = Field(..., ge=60, le=95)
    algorithm_label: str = ALGORITHM_LABEL
    last_updated: dt.datetime
    warnings: list[ForecastErrorKind] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "AAPL",
                "predictions": [
                    {"date": "2024-02-05", "predicted_price": 188.12, "confidence_percent": 80.4},
                    {"date": "2024-02-06", "predicted_price": 188.67, "confidence_percent": 77.4},
                ],
                "technical_indicators": {
                    "sma20": 184.31,
                    "sma50": 181.02,
                    "rsi": 58.12,
                    "volatility_percent": 4.62,
                },
                "signals": {"trend": "BULLISH", "momentum": "NEUTRAL", "macd_cross": "BULLISH"},
                "recommendation": "BUY",
                "accuracy_percent": 85.0,
                "algorithm_label": ALGORITHM_LABEL,
                "last_updated": "2024-02-04T10:30:00",
                "warnings": [],
            }
        }
