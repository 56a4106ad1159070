"""
Signal Synthesizer

Classifies trend, momentum and MACD crossover state and maps the
combination to a BUY/SELL/HOLD recommendation by majority vote.
Deterministic - no randomness, no I/O.
"""

import numpy as np

from stockcast.schemas.indicators import (
    MomentumState,
    Recommendation,
    TechnicalSignals,
    TrendDirection,
)
from stockcast.services.indicators.calculations import ema, rsi, sma


OVERBOUGHT_RSI = 70
OVERSOLD_RSI = 30


def classify_trend(short_average: float, long_average: float) -> TrendDirection:
    """Compare a short and a long average. Equal averages abstain."""
    if short_average > long_average:
        return TrendDirection.BULLISH
    if short_average < long_average:
        return TrendDirection.BEARISH
    return TrendDirection.NEUTRAL


def classify_momentum(rsi_value: float) -> MomentumState:
    if rsi_value > OVERBOUGHT_RSI:
        return MomentumState.OVERBOUGHT
    if rsi_value < OVERSOLD_RSI:
        return MomentumState.OVERSOLD
    return MomentumState.NEUTRAL


def recommend(signals: TechnicalSignals) -> Recommendation:
    """
    Majority vote over trend, momentum and MACD cross.

    Each signal casts at most one vote; NEUTRAL labels abstain.
    A tie (including no votes at all) is HOLD.
    """
    buy_votes = 0
    sell_votes = 0

    if signals.trend == TrendDirection.BULLISH:
        buy_votes += 1
    elif signals.trend == TrendDirection.BEARISH:
        sell_votes += 1

    if signals.momentum == MomentumState.OVERSOLD:
        buy_votes += 1
    elif signals.momentum == MomentumState.OVERBOUGHT:
        sell_votes += 1

    if signals.macd_cross == TrendDirection.BULLISH:
        buy_votes += 1
    elif signals.macd_cross == TrendDirection.BEARISH:
        sell_votes += 1

    if buy_votes > sell_votes:
        return Recommendation.BUY
    if sell_votes > buy_votes:
        return Recommendation.SELL
    return Recommendation.HOLD


def synthesize_signals(closes: np.ndarray) -> TechnicalSignals:
    """Derive the three vote labels from a closing-price series."""
    sma20 = sma(closes, 20, warmup=True)
    sma50 = sma(closes, 50, warmup=True)

    return TechnicalSignals(
        trend=classify_trend(sma20, sma50),
        momentum=classify_momentum(rsi(closes, 14)),
        macd_cross=classify_trend(ema(closes, 12), ema(closes, 26)),
    )
