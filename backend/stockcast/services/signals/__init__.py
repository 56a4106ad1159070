"""
Signal Synthesizer

CONTRACT:
    Input:  closing prices
    Output: TechnicalSignals + Recommendation

RESPONSIBILITIES:
    - Classify trend (SMA20 vs SMA50)
    - Classify momentum (RSI overbought/oversold)
    - Classify MACD cross (EMA12 vs EMA26)
    - Majority vote into BUY / SELL / HOLD

PURE PYTHON - deterministic, shared by the indicator and forecast services.
"""

from stockcast.services.signals.synthesizer import (
    classify_momentum,
    classify_trend,
    recommend,
    synthesize_signals,
)

__all__ = [
    "classify_momentum",
    "classify_trend",
    "recommend",
    "synthesize_signals",
]
