"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from stockcast.api.v1.endpoints import stock

router = APIRouter()

# Include all endpoint routers
router.include_router(stock.router, prefix="/stock", tags=["Stocks"])
