"""
CONTRACT 2: Indicator Engine

Input: list[PriceBar]
Output: IndicatorSnapshot

This module performs ALL indicator calculations.
Pure Python/NumPy - deterministic, no randomness.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SignalType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    NEUTRAL = "NEUTRAL"


class TrendDirection(str, Enum):
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"  # Compared averages are equal


class MomentumState(str, Enum):
    OVERBOUGHT = "OVERBOUGHT"
    OVERSOLD = "OVERSOLD"
    NEUTRAL = "NEUTRAL"


class Recommendation(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


# =============================================================================
# OUTPUT: Indicator Components
# =============================================================================


class MACDData(BaseModel):
    """MACD indicator values (latest only)."""

    macd_line: float
    signal_line: float
    histogram: float


class BollingerBandsData(BaseModel):
    """Bollinger Bands values."""

    upper: float
    middle: float
    lower: float


class IndicatorReading(BaseModel):
    """Single indicator value with its discrete signal."""

    name: str
    value: float
    signal: SignalType
    description: str


class TechnicalSignals(BaseModel):
    """Discrete labels fed into the recommendation vote."""

    trend: TrendDirection
    momentum: MomentumState
    macd_cross: TrendDirection


# =============================================================================
# OUTPUT: IndicatorSnapshot (Complete Response)
# =============================================================================


class IndicatorSnapshot(BaseModel):
    """
    Indicator readings for a symbol.
    Returned by: Indicator Service
    Consumed by: frontend technical-indicators card
    """

    symbol: str
    timestamp: datetime
    current_price: float
    indicators: dict[str, IndicatorReading] = Field(
        ...,
        description="Keyed by indicator id: rsi, macd, sma20, bollinger, stochastic",
    )
    macd: MACDData
    bollinger_bands: BollingerBandsData
    signals: TechnicalSignals
    recommendation: Recommendation
    bars_used: int = Field(..., ge=0)
    note: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "AAPL",
                "timestamp": "2024-02-04T10:30:00",
                "current_price": 187.42,
                "indicators": {
                    "rsi": {
                        "name": "RSI (14)",
                        "value": 62.5,
                        "signal": "NEUTRAL",
                        "description": "Relative Strength Index - measures overbought/oversold conditions",
                    },
                },
                "macd": {"macd_line": 1.21, "signal_line": 1.09, "histogram": 0.12},
                "bollinger_bands": {"upper": 192.1, "middle": 184.3, "lower": 176.5},
                "signals": {"trend": "BULLISH", "momentum": "NEUTRAL", "macd_cross": "BULLISH"},
                "recommendation": "BUY",
                "bars_used": 31,
            }
        }
