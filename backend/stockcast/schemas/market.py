"""
CONTRACT 1: Stock Data Provider

Input: symbol
Output: StockSnapshot

Quote, company profile and daily price history for one ticker,
normalized into a standard format. The forecast engine only ever
consumes the `historical_data` bars.
"""

import re
import datetime as dt
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# Ticker: 1-5 uppercase letters, optional 1-3 letter exchange suffix (e.g. "BRK.B", "HDFC.NS")
SYMBOL_PATTERN = r"^[A-Z]{1,5}(\.[A-Z]{1,3})?$"
_SYMBOL_RE = re.compile(SYMBOL_PATTERN)


def normalize_symbol(symbol: str) -> str:
    """Uppercase and strip a ticker as received from the client."""
    return symbol.upper().strip()


def is_valid_symbol(symbol: str) -> bool:
    """Check a normalized ticker against the symbol format."""
    return bool(_SYMBOL_RE.match(symbol))


# =============================================================================
# ENUMS
# =============================================================================


class DataSource(str, Enum):
    MOCK_DATA = "mock_data"


# =============================================================================
# PRICE HISTORY
# =============================================================================


class PriceBar(BaseModel):
    """One trading day's observation."""

    date: dt.date
    open: float = Field(..., ge=0)
    high: float = Field(..., ge=0)
    low: float = Field(..., ge=0)
    close: float = Field(..., ge=0, allow_inf_nan=False)
    volume: float = Field(..., ge=0)


# =============================================================================
# OUTPUT: StockSnapshot
# =============================================================================


class CompanyInfo(BaseModel):
    """Company profile shown next to the quote."""

    name: str
    sector: str
    industry: str
    market_cap: str
    pe_ratio: str
    dividend_yield: str
    description: str
    employees: str


class StockSnapshot(BaseModel):
    """
    Quote plus daily history for a single symbol.
    Returned by: Stock Data Provider
    Consumed by: Forecast Service, Indicator Service, frontend
    """

    symbol: str = Field(..., pattern=SYMBOL_PATTERN)
    current_price: float = Field(..., ge=0)
    change: float
    change_percent: float
    volume: int = Field(..., ge=0)
    previous_close: float = Field(..., ge=0)
    last_updated: dt.date
    historical_data: list[PriceBar]
    company_info: CompanyInfo
    data_source: DataSource
    note: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "AAPL",
                "current_price": 187.42,
                "change": 1.35,
                "change_percent": 0.73,
                "volume": 48200000,
                "previous_close": 186.07,
                "last_updated": "2024-02-02",
                "historical_data": [
                    {
                        "date": "2024-02-02",
                        "open": 185.55,
                        "high": 191.17,
                        "low": 183.67,
                        "close": 187.42,
                        "volume": 48200000,
                    }
                ],
                "company_info": {
                    "name": "Apple Inc.",
                    "sector": "Technology",
                    "industry": "Software",
                    "market_cap": "$1420B",
                    "pe_ratio": "28.31",
                    "dividend_yield": "0.52",
                    "description": "Apple Inc. is a leading company in its sector.",
                    "employees": "164K",
                },
                "data_source": "mock_data",
                "note": "Using demo data - API limit reached or service unavailable",
            }
        }
