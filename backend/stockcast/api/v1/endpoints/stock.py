"""
Stock API Endpoints

Endpoints for stock data, technical indicators and price forecasts.
"""

import logging

from fastapi import APIRouter, HTTPException
from starlette.concurrency import run_in_threadpool

from stockcast.schemas.market import StockSnapshot, is_valid_symbol, normalize_symbol
from stockcast.schemas.indicators import IndicatorSnapshot
from stockcast.schemas.forecast import ForecastError, ForecastErrorKind, ForecastRecord, ForecastRequest
from stockcast.services.base import ServiceError, ValidationError
from stockcast.services.data_ingestion import get_stock_data_service
from stockcast.services.forecast import get_forecast_service
from stockcast.services.indicators import get_indicator_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _invalid_symbol(symbol: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "error": ForecastErrorKind.INVALID_SYMBOL.value,
            "message": "Invalid stock symbol format",
            "symbol": symbol,
        },
    )


@router.get("/{symbol}", response_model=StockSnapshot)
async def get_stock(symbol: str):
    """
    Get quote, company info and daily history for a symbol.

    Served from the mock data provider when no live provider is configured.
    """
    service = get_stock_data_service()
    try:
        result = await service.execute(symbol)
    except ValidationError:
        raise _invalid_symbol(normalize_symbol(symbol))

    for warning in result.warnings:
        logger.debug(warning)

    return result.snapshot


@router.post("/{symbol}/predict", response_model=ForecastRecord)
async def predict(symbol: str, request: ForecastRequest):
    """
    Generate a 7-day price forecast from the supplied history.

    Returns:
        - Daily predicted prices with confidence
        - SMA20, SMA50, RSI and volatility
        - Trend, momentum and MACD signals
        - BUY / SELL / HOLD recommendation

    Requires at least 10 daily bars.
    """
    service = get_forecast_service()
    try:
        result = await run_in_threadpool(
            service.generate_forecast, symbol, request.historical_data
        )
    except Exception as e:
        logger.error(f"Prediction failed for {symbol}: {e}")
        raise HTTPException(
            status_code=500,
            detail={"error": "PREDICTION_FAILED", "message": "Failed to generate predictions"},
        )

    if isinstance(result, ForecastError):
        raise HTTPException(
            status_code=400,
            detail={
                "error": result.kind.value,
                "message": result.message,
                "symbol": result.symbol,
            },
        )

    return result


@router.get("/{symbol}/indicators", response_model=IndicatorSnapshot)
async def get_indicators(symbol: str):
    """
    Get technical indicator readings for a symbol.

    Returns RSI, MACD, SMA(20), Bollinger Bands and Stochastic readings,
    each with a BUY / SELL / NEUTRAL signal, plus the overall recommendation.
    """
    symbol = normalize_symbol(symbol)
    if not is_valid_symbol(symbol):
        raise _invalid_symbol(symbol)

    data_result = await get_stock_data_service().execute(symbol)
    bars = data_result.snapshot.historical_data

    try:
        return get_indicator_service().calculate_snapshot(symbol, bars)
    except ServiceError as e:
        logger.error(f"Indicator calculation failed for {symbol}: {e}")
        raise HTTPException(status_code=500, detail=e.message)
