"""
StockCast Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockcast.core.config import settings
from stockcast.api.v1 import router as api_v1_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(
        f"Forecast: min history {settings.forecast_min_history} bars, "
        f"{settings.monte_carlo_simulations} simulations, "
        f"MACD signal mode '{settings.macd_signal_mode}'"
    )
    if settings.forecast_seed is not None:
        logger.warning(f"Monte Carlo seed fixed at {settings.forecast_seed}")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    StockCast Stock Dashboard API

    ## Architecture
    - **Stock Data**: Quotes and daily history (mock data fallback)
    - **Indicator Engine**: RSI, MACD, SMA, Bollinger Bands, Stochastic (pure Python/NumPy)
    - **Forecast Engine**: Linear regression + Monte Carlo ensemble, 7-day horizon
    - **Signal Synthesizer**: Trend / momentum / MACD vote into BUY, SELL or HOLD

    ## Core Principles
    - Forecasts are recomputed per request, never stored
    - Confidence decays with volatility and horizon
    - Predictions are illustrative, not investment advice
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware - allow both frontend ports
cors_origins = [
    "http://localhost:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:3001",
]
# Add any additional origins from settings
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "StockCast Backend API",
        "docs": "/docs",
        "health": "/health",
    }
