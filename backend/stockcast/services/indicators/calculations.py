"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
Every function reads a chronological array of prices (oldest first)
and returns the LATEST value only. Short inputs degrade to documented
fallback values instead of raising.
"""

import numpy as np
from dataclasses import dataclass

from stockcast.schemas.market import PriceBar
from stockcast.schemas.indicators import SignalType


TRADING_DAYS_PER_YEAR = 252
DEFAULT_VOLATILITY = 0.02
NEUTRAL_RSI = 50.0
MACD_SIGNAL_FACTOR = 0.9


@dataclass
class OHLCVData:
    """OHLCV data arrays for calculations."""

    opens: np.ndarray
    highs: np.ndarray
    lows: np.ndarray
    closes: np.ndarray
    volumes: np.ndarray


def bars_to_arrays(bars: list[PriceBar]) -> OHLCVData:
    """Convert PriceBar list to numpy arrays."""
    return OHLCVData(
        opens=np.array([b.open for b in bars], dtype=float),
        highs=np.array([b.high for b in bars], dtype=float),
        lows=np.array([b.low for b in bars], dtype=float),
        closes=np.array([b.close for b in bars], dtype=float),
        volumes=np.array([b.volume for b in bars], dtype=float),
    )


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(prices: np.ndarray, period: int, warmup: bool = False) -> float:
    """
    Simple Moving Average of the last `period` prices.

    With fewer than `period` prices the latest price is returned
    (0 for an empty series). With `warmup=True` the mean of whatever
    is available is used instead.
    """
    n = len(prices)
    if n == 0:
        return 0.0
    if n < period:
        return float(np.mean(prices)) if warmup else float(prices[-1])
    return float(np.mean(prices[-period:]))


def ema_series(prices: np.ndarray, period: int) -> np.ndarray:
    """Exponential Moving Average over the whole series, seeded with the first price."""
    result = np.empty(len(prices), dtype=float)
    if len(prices) == 0:
        return result

    multiplier = 2 / (period + 1)
    result[0] = prices[0]

    for i in range(1, len(prices)):
        result[i] = (prices[i] - result[i - 1]) * multiplier + result[i - 1]

    return result


def ema(prices: np.ndarray, period: int) -> float:
    """Latest EMA value. 0 for an empty series."""
    if len(prices) == 0:
        return 0.0
    return float(ema_series(prices, period)[-1])


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(prices: np.ndarray, period: int = 14) -> float:
    """
    Relative Strength Index.

    Gains and losses are averaged over the trailing `period` changes
    (simple mean, not Wilder smoothing).
    """
    if len(prices) < period + 1:
        return NEUTRAL_RSI

    deltas = np.diff(prices)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    avg_gain = float(np.mean(gains[-period:]))
    avg_loss = float(np.mean(losses[-period:]))

    if avg_loss == 0:
        # No movement at all is neutral, only gains is a perfect uptrend
        return NEUTRAL_RSI if avg_gain == 0 else 100.0

    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def macd(
    prices: np.ndarray,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    signal_mode: str = "approximate",
) -> tuple[float, float, float]:
    """
    MACD (Moving Average Convergence Divergence).

    signal_mode="approximate" sets the signal line to 0.9 x the MACD line.
    signal_mode="ema" uses a true `signal_period` EMA of the MACD history.

    Returns: (macd_line, signal_line, histogram)
    """
    if len(prices) == 0:
        return 0.0, 0.0, 0.0

    if signal_mode == "ema":
        macd_history = ema_series(prices, fast_period) - ema_series(prices, slow_period)
        macd_line = float(macd_history[-1])
        signal_line = ema(macd_history, signal_period)
    elif signal_mode == "approximate":
        macd_line = ema(prices, fast_period) - ema(prices, slow_period)
        signal_line = macd_line * MACD_SIGNAL_FACTOR
    else:
        raise ValueError(f"Unknown MACD signal mode: {signal_mode}")

    return macd_line, signal_line, macd_line - signal_line


def stochastic_k(
    highs: np.ndarray, lows: np.ndarray, closes: np.ndarray, period: int = 14
) -> float:
    """Stochastic %K of the latest bar. 50 when undefined."""
    if len(closes) < period:
        return 50.0

    highest_high = float(np.max(highs[-period:]))
    lowest_low = float(np.min(lows[-period:]))

    if highest_high == lowest_low:
        return 50.0

    k = ((closes[-1] - lowest_low) / (highest_high - lowest_low)) * 100
    return float(np.clip(k, 0, 100))


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def annualized_volatility(prices: np.ndarray) -> float:
    """
    Annualized volatility of simple daily returns.

    Population variance of returns x 252, square-rooted. Returns whose
    base price is zero are skipped.
    """
    if len(prices) < 2:
        return DEFAULT_VOLATILITY

    base = prices[:-1]
    valid = base != 0
    if not np.any(valid):
        return 0.0

    returns = (prices[1:][valid] - base[valid]) / base[valid]
    variance = float(np.var(returns))
    return float(np.sqrt(variance * TRADING_DAYS_PER_YEAR))


def bollinger_bands(
    prices: np.ndarray, period: int = 20, std_dev: float = 2.0
) -> tuple[float, float, float]:
    """
    Bollinger Bands.

    Deviation of the last `period` prices is measured around the SMA
    value, not around their own mean.

    Returns: (upper, middle, lower)
    """
    middle = sma(prices, period)
    recent = prices[-period:]
    if len(recent) == 0:
        return middle, middle, middle

    variance = float(np.sum((recent - middle) ** 2)) / period
    deviation = float(np.sqrt(variance))

    return middle + deviation * std_dev, middle, middle - deviation * std_dev


# =============================================================================
# SIGNAL MAPPING
# =============================================================================


def rsi_signal(value: float) -> SignalType:
    if value > 70:
        return SignalType.SELL
    if value < 30:
        return SignalType.BUY
    return SignalType.NEUTRAL


def macd_signal(histogram: float) -> SignalType:
    if histogram > 0:
        return SignalType.BUY
    if histogram < 0:
        return SignalType.SELL
    return SignalType.NEUTRAL


def sma_signal(price: float, average: float) -> SignalType:
    return SignalType.BUY if price > average else SignalType.SELL


def bollinger_signal(price: float, upper: float, lower: float) -> SignalType:
    if price > upper:
        return SignalType.SELL
    if price < lower:
        return SignalType.BUY
    return SignalType.NEUTRAL


def stochastic_signal(k: float) -> SignalType:
    if k > 80:
        return SignalType.SELL
    if k < 20:
        return SignalType.BUY
    return SignalType.NEUTRAL


def percent_b(price: float, upper: float, lower: float) -> float:
    """Price position within the bands, in percent. 50 for a zero-width band."""
    if upper == lower:
        return 50.0
    return ((price - lower) / (upper - lower)) * 100
