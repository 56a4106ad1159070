"""
Mock Data Generator

Generates plausible stock data for development, demos and as the
fallback source when no live provider is available.
"""

import random
from datetime import date, timedelta
from typing import Optional

from stockcast.schemas.market import CompanyInfo, DataSource, PriceBar, StockSnapshot


COMPANY_NAMES = {
    "AAPL": "Apple Inc.",
    "GOOGL": "Alphabet Inc.",
    "MSFT": "Microsoft Corporation",
    "TSLA": "Tesla, Inc.",
    "AMZN": "Amazon.com, Inc.",
    "NVDA": "NVIDIA Corporation",
    "META": "Meta Platforms, Inc.",
    "NFLX": "Netflix, Inc.",
    "HDFC": "HDFC Bank Limited",
}

MOCK_NOTE = "Using demo data - API limit reached or service unavailable"


def get_company_name(symbol: str) -> str:
    """Known company name, or a generic one built from the ticker."""
    return COMPANY_NAMES.get(symbol, f"{symbol} Corporation")


def generate_mock_history(
    base_price: float,
    days: int = 30,
    end_date: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> list[PriceBar]:
    """
    Generate `days + 1` daily bars ending on `end_date`.

    Closes scatter uniformly within +/-10 of the base price.
    """
    rng = rng or random.Random()
    if end_date is None:
        end_date = date.today()

    bars = []
    for i in range(days, -1, -1):
        price = base_price + (rng.random() - 0.5) * 20
        bars.append(
            PriceBar(
                date=end_date - timedelta(days=i),
                open=round(price * 0.99, 2),
                high=round(price * 1.02, 2),
                low=round(price * 0.98, 2),
                close=round(price, 2),
                volume=rng.randint(1_000_000, 10_999_999),
            )
        )

    return bars


def generate_mock_company_info(symbol: str, rng: Optional[random.Random] = None) -> CompanyInfo:
    """Generate a company profile for the ticker."""
    rng = rng or random.Random()
    name = get_company_name(symbol)

    return CompanyInfo(
        name=name,
        sector="Technology",
        industry="Software",
        market_cap=f"${rng.random() * 2000 + 100:.0f}B",
        pe_ratio=f"{rng.random() * 30 + 10:.2f}",
        dividend_yield=f"{rng.random() * 5:.2f}",
        description=f"{name} is a leading company in its sector.",
        employees=f"{rng.random() * 500 + 50:.0f}K",
    )


def generate_mock_stock_data(
    symbol: str,
    days: int = 30,
    end_date: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> StockSnapshot:
    """Generate a complete mock snapshot for a symbol."""
    rng = rng or random.Random()
    if end_date is None:
        end_date = date.today()

    base_price = rng.random() * 200 + 50
    change = (rng.random() - 0.5) * 10

    return StockSnapshot(
        symbol=symbol,
        current_price=round(base_price, 2),
        change=round(change, 2),
        change_percent=round((change / base_price) * 100, 2),
        volume=rng.randint(5_000_000, 54_999_999),
        previous_close=round(base_price - change, 2),
        last_updated=end_date,
        historical_data=generate_mock_history(base_price, days, end_date, rng),
        company_info=generate_mock_company_info(symbol, rng),
        data_source=DataSource.MOCK_DATA,
        note=MOCK_NOTE,
    )
