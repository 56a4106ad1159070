"""
Stock Data Service Interface

Defines the contract for the stock data layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from stockcast.services.base import BaseService
from stockcast.schemas.market import StockSnapshot


@dataclass
class StockDataResult:
    """Result from the data layer including any warnings."""

    snapshot: StockSnapshot
    warnings: list[str] = field(default_factory=list)


class StockDataProvider(ABC):
    """A source of quotes and daily history for one ticker."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        pass

    @abstractmethod
    async def get_stock_data(self, symbol: str) -> StockSnapshot:
        """Return the snapshot for an already validated, uppercase symbol."""
        pass


class StockDataServiceInterface(BaseService[str, StockDataResult]):
    """
    Stock Data Service Contract.

    INPUT: symbol (any case)

    OUTPUT: StockDataResult
        - snapshot: StockSnapshot with quote, company info and daily bars
        - warnings: Non-fatal warnings (e.g. demo data in use)
    """

    @property
    def name(self) -> str:
        return "StockDataService"

    @abstractmethod
    async def execute(self, input_data: str) -> StockDataResult:
        """Validate the symbol and fetch its snapshot."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check the provider can serve data."""
        pass
