"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from dataclasses import dataclass

from stockcast.services.base import BaseService
from stockcast.schemas.market import PriceBar
from stockcast.schemas.indicators import IndicatorSnapshot


@dataclass
class IndicatorInput:
    """Symbol and its daily history, oldest bar first."""

    symbol: str
    bars: list[PriceBar]


class IndicatorServiceInterface(BaseService[IndicatorInput, IndicatorSnapshot]):
    """
    Indicator Engine Service Contract.

    INPUT: IndicatorInput
        - symbol: Ticker the history belongs to
        - bars: Daily PriceBars (at least one)

    OUTPUT: IndicatorSnapshot
        - indicators: name -> {value, signal, description}
        - macd / bollinger_bands: raw latest values
        - signals + recommendation from the signal synthesizer
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: IndicatorInput) -> IndicatorSnapshot:
        """Calculate indicators for the input history."""
        pass

    @abstractmethod
    def calculate_snapshot(self, symbol: str, bars: list[PriceBar]) -> IndicatorSnapshot:
        """
        Calculate indicators for a single symbol.

        Args:
            symbol: Ticker
            bars: Daily history, oldest first

        Returns:
            Indicator readings with discrete signals

        Raises:
            ValidationError: If `bars` is empty
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
