"""
Indicator Engine Service Implementation

Calculates technical indicators from daily price bars.
Pure Python/NumPy calculations.
"""

from datetime import datetime
from typing import Optional

from stockcast.core.config import ForecastConfig, get_settings
from stockcast.schemas.market import PriceBar, normalize_symbol
from stockcast.schemas.indicators import (
    BollingerBandsData,
    IndicatorReading,
    IndicatorSnapshot,
    MACDData,
)
from stockcast.services.base import ValidationError
from stockcast.services.indicators.interface import IndicatorInput, IndicatorServiceInterface
from stockcast.services.indicators.calculations import (
    OHLCVData,
    bars_to_arrays,
    bollinger_bands,
    bollinger_signal,
    macd,
    macd_signal,
    percent_b,
    rsi,
    rsi_signal,
    sma,
    sma_signal,
    stochastic_k,
    stochastic_signal,
)
from stockcast.services.signals import recommend, synthesize_signals


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Calculates technical indicators for market analysis.
    All calculations are deterministic and reproducible.
    """

    def __init__(self, config: Optional[ForecastConfig] = None):
        self.config = config or ForecastConfig()

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: IndicatorInput) -> IndicatorSnapshot:
        """Calculate indicators for the input history."""
        return self.calculate_snapshot(input_data.symbol, input_data.bars)

    def calculate_snapshot(self, symbol: str, bars: list[PriceBar]) -> IndicatorSnapshot:
        """Calculate all indicators for a single symbol."""
        symbol = normalize_symbol(symbol)
        if not bars:
            raise ValidationError(self.name, f"No price history for {symbol}")

        data = bars_to_arrays(bars)
        closes = data.closes
        current = float(closes[-1])

        macd_line, signal_line, histogram = macd(
            closes, signal_mode=self.config.macd_signal_mode
        )
        upper, middle, lower = bollinger_bands(closes, 20, 2.0)
        signals = synthesize_signals(closes)

        return IndicatorSnapshot(
            symbol=symbol,
            timestamp=datetime.now(),
            current_price=round(current, 2),
            indicators=self._build_readings(data, macd_line, histogram, upper, lower),
            macd=MACDData(
                macd_line=round(macd_line, 4),
                signal_line=round(signal_line, 4),
                histogram=round(histogram, 4),
            ),
            bollinger_bands=BollingerBandsData(
                upper=round(upper, 2),
                middle=round(middle, 2),
                lower=round(lower, 2),
            ),
            signals=signals,
            recommendation=recommend(signals),
            bars_used=len(bars),
            note="Short history: some indicators use fallback values" if len(bars) < 27 else None,
        )

    def _build_readings(
        self,
        data: OHLCVData,
        macd_line: float,
        histogram: float,
        upper: float,
        lower: float,
    ) -> dict[str, IndicatorReading]:
        """Build the name -> reading mapping shown on the indicators card."""
        closes = data.closes
        current = float(closes[-1])
        rsi_val = rsi(closes, 14)
        sma_20 = sma(closes, 20)
        stoch_k = stochastic_k(data.highs, data.lows, closes, 14)

        return {
            "rsi": IndicatorReading(
                name="RSI (14)",
                value=round(rsi_val, 2),
                signal=rsi_signal(rsi_val),
                description="Relative Strength Index - measures overbought/oversold conditions",
            ),
            "macd": IndicatorReading(
                name="MACD",
                value=round(macd_line, 4),
                signal=macd_signal(histogram),
                description="Moving Average Convergence Divergence - trend following momentum indicator",
            ),
            "sma20": IndicatorReading(
                name="SMA (20)",
                value=round(sma_20, 2),
                signal=sma_signal(current, sma_20),
                description="Simple Moving Average - trend direction indicator",
            ),
            "bollinger": IndicatorReading(
                name="Bollinger Bands",
                value=round(percent_b(current, upper, lower), 2),
                signal=bollinger_signal(current, upper, lower),
                description="Volatility indicator using standard deviation",
            ),
            "stochastic": IndicatorReading(
                name="Stochastic (14)",
                value=round(stoch_k, 2),
                signal=stochastic_signal(stoch_k),
                description="Momentum oscillator comparing closing price to price range",
            ),
        }

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService(ForecastConfig.from_settings(get_settings()))
    return _service_instance
