"""
Forecast Models

Linear regression and Monte Carlo price models plus the ensemble blend,
confidence decay and accuracy score built on top of them.

The Monte Carlo model draws from an injected numpy Generator so callers
control seeding. Everything else is deterministic.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional

from stockcast.schemas.forecast import FORECAST_HORIZON_DAYS
from stockcast.services.indicators.calculations import TRADING_DAYS_PER_YEAR


BASE_CONFIDENCE = 85.0
MIN_CONFIDENCE = 50.0
MAX_VOLATILITY_PENALTY = 20.0
DAILY_CONFIDENCE_DECAY = 3.0

BASE_ACCURACY = 75.0
MIN_ACCURACY = 60.0
MAX_ACCURACY = 95.0
LOW_VOLATILITY = 0.20
HIGH_VOLATILITY = 0.40


@dataclass
class ModelOutputs:
    """Per-day predictions of each model and the blended result."""

    linear: np.ndarray
    monte_carlo: np.ndarray
    blended: np.ndarray
    confidence: np.ndarray


# =============================================================================
# MODEL A: LINEAR REGRESSION
# =============================================================================


def linear_regression_fit(prices: np.ndarray) -> tuple[float, float]:
    """
    Ordinary least squares of price against bar index.

    Returns: (slope, intercept)
    """
    n = len(prices)
    x = np.arange(n, dtype=float)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(prices))
    sum_xy = float(np.sum(x * prices))
    sum_xx = float(np.sum(x * x))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        # Single point: no trend
        slope = 0.0
    else:
        slope = (n * sum_xy - sum_x * sum_y) / denominator

    intercept = (sum_y - slope * sum_x) / n if n > 0 else 0.0
    return slope, intercept


def linear_regression_predict(
    prices: np.ndarray, days: int = FORECAST_HORIZON_DAYS
) -> np.ndarray:
    """Extrapolate the fitted line `days` bars past the end. Never negative."""
    slope, intercept = linear_regression_fit(prices)
    n = len(prices)
    future_x = np.arange(n, n + days, dtype=float)
    return np.maximum(slope * future_x + intercept, 0.0)


# =============================================================================
# MODEL B: MONTE CARLO
# =============================================================================


def monte_carlo_predict(
    current_price: float,
    volatility: float,
    days: int = FORECAST_HORIZON_DAYS,
    simulations: int = 1000,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Median terminal price of random paths for each future day.

    Day `d` gets its own `simulations` paths of `d` uniform shocks in
    [-1, 1] scaled by daily volatility. Prices are floored at zero after
    every step. The sorted element at index `simulations // 2` is taken,
    which is the upper median for an even count.
    """
    if rng is None:
        rng = np.random.default_rng()

    daily_volatility = volatility / np.sqrt(TRADING_DAYS_PER_YEAR)
    predictions = np.empty(days, dtype=float)

    for day in range(1, days + 1):
        shocks = rng.uniform(-1.0, 1.0, size=(simulations, day))
        paths = np.full(simulations, float(current_price))

        for step in range(day):
            paths = np.maximum(paths * (1 + shocks[:, step] * daily_volatility), 0.0)

        paths.sort()
        predictions[day - 1] = paths[simulations // 2]

    return predictions


# =============================================================================
# ENSEMBLE
# =============================================================================


def blend_predictions(
    linear: np.ndarray,
    monte_carlo: np.ndarray,
    linear_weight: float = 0.6,
    monte_carlo_weight: float = 0.4,
) -> np.ndarray:
    """Weighted day-by-day combination of the two models."""
    return linear * linear_weight + monte_carlo * monte_carlo_weight


def confidence_decay(volatility: float, days: int = FORECAST_HORIZON_DAYS) -> np.ndarray:
    """
    Confidence per day, day 0 being tomorrow.

    85 minus a volatility penalty (capped at 20) minus 3 per day,
    floored at 50.
    """
    volatility_penalty = min(volatility * 100, MAX_VOLATILITY_PENALTY)
    time_penalty = DAILY_CONFIDENCE_DECAY * np.arange(days, dtype=float)
    return np.maximum(BASE_CONFIDENCE - volatility_penalty - time_penalty, MIN_CONFIDENCE)


def accuracy_score(volatility: float) -> float:
    """Static accuracy metadata from the volatility regime."""
    if volatility < LOW_VOLATILITY:
        bonus = 10.0
    elif volatility > HIGH_VOLATILITY:
        bonus = -10.0
    else:
        bonus = 0.0
    return float(np.clip(BASE_ACCURACY + bonus, MIN_ACCURACY, MAX_ACCURACY))


def run_models(
    prices: np.ndarray,
    volatility: float,
    days: int = FORECAST_HORIZON_DAYS,
    simulations: int = 1000,
    linear_weight: float = 0.6,
    monte_carlo_weight: float = 0.4,
    rng: Optional[np.random.Generator] = None,
) -> ModelOutputs:
    """Run both models on a closing-price series and blend them."""
    linear = linear_regression_predict(prices, days)
    monte_carlo = monte_carlo_predict(float(prices[-1]), volatility, days, simulations, rng)

    return ModelOutputs(
        linear=linear,
        monte_carlo=monte_carlo,
        blended=blend_predictions(linear, monte_carlo, linear_weight, monte_carlo_weight),
        confidence=confidence_decay(volatility, days),
    )


def flat_outputs(current_price: float, days: int = FORECAST_HORIZON_DAYS) -> ModelOutputs:
    """Fallback for degenerate input: hold the current price at minimum confidence."""
    flat = np.full(days, max(float(current_price), 0.0))
    return ModelOutputs(
        linear=flat,
        monte_carlo=flat.copy(),
        blended=flat.copy(),
        confidence=np.full(days, MIN_CONFIDENCE),
    )
