"""
Forecast Engine Service Implementation

Turns a daily price history into a 7-day ensemble forecast.
Each call owns its working arrays and random generator, so concurrent
requests need no coordination.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional

import numpy as np

from stockcast.core.config import ForecastConfig, get_settings
from stockcast.schemas.market import PriceBar, is_valid_symbol, normalize_symbol
from stockcast.schemas.forecast import (
    FORECAST_HORIZON_DAYS,
    DailyPrediction,
    ForecastError,
    ForecastErrorKind,
    ForecastIndicators,
    ForecastRecord,
)
from stockcast.services.forecast.interface import (
    ForecastInput,
    ForecastResult,
    ForecastServiceInterface,
)
from stockcast.services.forecast.models import (
    ModelOutputs,
    accuracy_score,
    flat_outputs,
    run_models,
)
from stockcast.services.indicators.calculations import annualized_volatility, rsi, sma
from stockcast.services.signals import recommend, synthesize_signals

logger = logging.getLogger(__name__)


class ForecastService(ForecastServiceInterface):
    """
    Forecast Engine Service.

    Blends linear regression (deterministic) with Monte Carlo
    simulation (stochastic) and annotates the result with confidence,
    technical indicators and a recommendation.
    """

    def __init__(self, config: Optional[ForecastConfig] = None):
        self.config = config or ForecastConfig()

    @property
    def name(self) -> str:
        return "ForecastService"

    async def execute(self, input_data: ForecastInput) -> ForecastResult:
        """Generate a forecast for the input history."""
        return self.generate_forecast(input_data.symbol, input_data.bars)

    def generate_forecast(
        self,
        symbol: str,
        bars: list[PriceBar],
        today: Optional[date] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> ForecastResult:
        """Generate a forecast, or a ForecastError if the input is rejected."""
        symbol = normalize_symbol(symbol)
        if not is_valid_symbol(symbol):
            return ForecastError(
                kind=ForecastErrorKind.INVALID_SYMBOL,
                message="Invalid stock symbol format",
                symbol=symbol,
            )

        if len(bars) < self.config.min_history:
            logger.info(
                f"Rejecting forecast for {symbol}: {len(bars)} bars < {self.config.min_history}"
            )
            return ForecastError(
                kind=ForecastErrorKind.INSUFFICIENT_DATA,
                message=(
                    f"Insufficient historical data: {len(bars)} bars, "
                    f"at least {self.config.min_history} required"
                ),
                symbol=symbol,
            )

        closes = np.array([bar.close for bar in bars], dtype=float)
        volatility = annualized_volatility(closes)
        warnings: list[ForecastErrorKind] = []

        if not np.any(closes):
            logger.warning(f"All-zero price history for {symbol}, using flat forecast")
            warnings.append(ForecastErrorKind.DEGENERATE_INPUT)
            outputs = flat_outputs(closes[-1])
        else:
            outputs = self.run_models(closes, volatility, rng)
            if not np.all(np.isfinite(outputs.blended)):
                logger.warning(f"Non-finite model output for {symbol}, using flat forecast")
                warnings.append(ForecastErrorKind.DEGENERATE_INPUT)
                outputs = flat_outputs(closes[-1])

        signals = synthesize_signals(closes)

        return ForecastRecord(
            symbol=symbol,
            predictions=self._build_predictions(outputs, today or date.today()),
            technical_indicators=ForecastIndicators(
                sma20=round(sma(closes, 20), 2),
                sma50=round(sma(closes, 50), 2),
                rsi=round(rsi(closes, 14), 2),
                volatility_percent=round(volatility * 100, 2),
            ),
            signals=signals,
            recommendation=recommend(signals),
            accuracy_percent=round(accuracy_score(volatility), 1),
            last_updated=datetime.now(),
            warnings=warnings,
        )

    def run_models(
        self,
        closes: np.ndarray,
        volatility: float,
        rng: Optional[np.random.Generator] = None,
    ) -> ModelOutputs:
        """Run the ensemble with this service's configuration."""
        if rng is None:
            rng = np.random.default_rng(self.config.seed)

        return run_models(
            closes,
            volatility,
            days=FORECAST_HORIZON_DAYS,
            simulations=self.config.simulations,
            linear_weight=self.config.linear_weight,
            monte_carlo_weight=self.config.monte_carlo_weight,
            rng=rng,
        )

    def _build_predictions(self, outputs: ModelOutputs, today: date) -> list[DailyPrediction]:
        """Date and round the blended predictions, tomorrow first."""
        return [
            DailyPrediction(
                date=today + timedelta(days=i + 1),
                predicted_price=round(float(price), 2),
                confidence_percent=round(float(confidence), 1),
            )
            for i, (price, confidence) in enumerate(zip(outputs.blended, outputs.confidence))
        ]

    async def health_check(self) -> bool:
        """Forecast service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[ForecastService] = None


def get_forecast_service() -> ForecastService:
    """Get or create forecast service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ForecastService(ForecastConfig.from_settings(get_settings()))
    return _service_instance
