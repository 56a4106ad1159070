"""
Forecast Service Interface

Defines the contract for the forecast engine.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

import numpy as np

from stockcast.services.base import BaseService
from stockcast.schemas.market import PriceBar
from stockcast.schemas.forecast import ForecastError, ForecastRecord


@dataclass
class ForecastInput:
    """Symbol and its daily history, oldest bar first."""

    symbol: str
    bars: list[PriceBar]


ForecastResult = Union[ForecastRecord, ForecastError]


class ForecastServiceInterface(BaseService[ForecastInput, ForecastResult]):
    """
    Forecast Service Contract.

    INPUT: ForecastInput
        - symbol: Ticker the history belongs to
        - bars: At least `min_history` daily PriceBars

    OUTPUT: ForecastRecord | ForecastError
        - ForecastRecord: 7 dated predictions, indicators, signals, recommendation
        - ForecastError: INSUFFICIENT_DATA or INVALID_SYMBOL, never raised
    """

    @property
    def name(self) -> str:
        return "ForecastService"

    @abstractmethod
    async def execute(self, input_data: ForecastInput) -> ForecastResult:
        """Generate a forecast for the input history."""
        pass

    @abstractmethod
    def generate_forecast(
        self,
        symbol: str,
        bars: list[PriceBar],
        today: Optional[date] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> ForecastResult:
        """
        Generate a forecast synchronously.

        Args:
            symbol: Ticker, normalized to uppercase
            bars: Daily history, oldest first
            today: Date the forecast is anchored to (defaults to today)
            rng: Random source for the Monte Carlo model

        Returns:
            ForecastRecord, or ForecastError describing why none was produced
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Forecast service is always healthy (pure computation)."""
        pass
