"""
Stock Data Service

CONTRACT:
    Input:  symbol
    Output: StockDataResult (StockSnapshot + warnings)

RESPONSIBILITIES:
    - Normalize and validate ticker symbols
    - Fetch quote, company info and daily history from the provider
    - Generate mock data when no live provider is configured

Network fetching, retries and caching belong to a live provider
implementation and are not part of this package.
"""

from stockcast.services.data_ingestion.interface import (
    StockDataProvider,
    StockDataResult,
    StockDataServiceInterface,
)
from stockcast.services.data_ingestion.service import (
    MockDataProvider,
    StockDataService,
    get_stock_data_service,
)

__all__ = [
    "StockDataProvider",
    "StockDataResult",
    "StockDataServiceInterface",
    "MockDataProvider",
    "StockDataService",
    "get_stock_data_service",
]
