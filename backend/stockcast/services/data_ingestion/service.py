"""
Stock Data Service Implementation

Validates tickers and fetches snapshots from the configured provider.
Only the mock provider ships; a live quote provider plugs in through
StockDataProvider.
"""

import logging
import random
from typing import Optional

from stockcast.core.config import get_settings
from stockcast.schemas.market import (
    DataSource,
    StockSnapshot,
    is_valid_symbol,
    normalize_symbol,
)
from stockcast.services.base import ValidationError
from stockcast.services.data_ingestion.interface import (
    StockDataProvider,
    StockDataResult,
    StockDataServiceInterface,
)
from stockcast.services.data_ingestion.mock_data import generate_mock_stock_data

logger = logging.getLogger(__name__)


class MockDataProvider(StockDataProvider):
    """Provider backed by the mock data generator."""

    def __init__(self, history_days: int = 30, rng: Optional[random.Random] = None):
        self.history_days = history_days
        self._rng = rng

    @property
    def source_name(self) -> str:
        return DataSource.MOCK_DATA.value

    async def get_stock_data(self, symbol: str) -> StockSnapshot:
        return generate_mock_stock_data(symbol, days=self.history_days, rng=self._rng)


class StockDataService(StockDataServiceInterface):
    """
    Stock Data Service.

    Normalizes and validates the ticker, then delegates to the provider.
    """

    def __init__(self, provider: Optional[StockDataProvider] = None):
        self.provider = provider or MockDataProvider(get_settings().mock_history_days)

    @property
    def name(self) -> str:
        return "StockDataService"

    async def execute(self, input_data: str) -> StockDataResult:
        """Validate the symbol and fetch its snapshot."""
        symbol = normalize_symbol(input_data)
        if not is_valid_symbol(symbol):
            raise ValidationError(
                self.name, "Invalid stock symbol format", {"symbol": symbol}
            )

        logger.info(f"Fetching data for {symbol} from {self.provider.source_name}")
        snapshot = await self.provider.get_stock_data(symbol)

        warnings = []
        if snapshot.data_source == DataSource.MOCK_DATA:
            warnings.append(f"Demo data in use for {symbol}")

        return StockDataResult(snapshot=snapshot, warnings=warnings)

    async def health_check(self) -> bool:
        """Check the provider can serve data."""
        try:
            await self.provider.get_stock_data("AAPL")
            return True
        except Exception as e:
            logger.error(f"Provider {self.provider.source_name} health check failed: {e}")
            return False


# Singleton instance
_service_instance: Optional[StockDataService] = None


def get_stock_data_service() -> StockDataService:
    """Get or create stock data service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = StockDataService()
    return _service_instance
