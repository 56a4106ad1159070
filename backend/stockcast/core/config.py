"""
Application Configuration

All settings loaded from environment variables.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings


# Bars needed before a forecast is attempted
MIN_FORECAST_HISTORY = 10


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "StockCast Backend"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Forecast engine
    forecast_min_history: int = Field(MIN_FORECAST_HISTORY, ge=MIN_FORECAST_HISTORY)
    monte_carlo_simulations: int = Field(1000, gt=0)
    linear_weight: float = Field(0.6, ge=0)
    monte_carlo_weight: float = Field(0.4, ge=0)
    macd_signal_mode: Literal["approximate", "ema"] = "approximate"
    forecast_seed: Optional[int] = None  # Fixed seed for reproducible runs

    # Mock data provider
    mock_history_days: int = 30

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@dataclass(frozen=True)
class ForecastConfig:
    """Tunables passed to the forecast engine. The horizon is fixed at 7 days."""

    min_history: int = MIN_FORECAST_HISTORY
    simulations: int = 1000
    linear_weight: float = 0.6
    monte_carlo_weight: float = 0.4
    macd_signal_mode: str = "approximate"
    seed: Optional[int] = None

    def __post_init__(self):
        if self.min_history < MIN_FORECAST_HISTORY:
            raise ValueError(f"min_history must be at least {MIN_FORECAST_HISTORY}")
        if self.simulations <= 0:
            raise ValueError("simulations must be positive")
        if self.linear_weight < 0 or self.monte_carlo_weight < 0:
            raise ValueError("model weights must be non-negative")
        if self.macd_signal_mode not in ("approximate", "ema"):
            raise ValueError(f"Unknown MACD signal mode: {self.macd_signal_mode}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ForecastConfig":
        return cls(
            min_history=settings.forecast_min_history,
            simulations=settings.monte_carlo_simulations,
            linear_weight=settings.linear_weight,
            monte_carlo_weight=settings.monte_carlo_weight,
            macd_signal_mode=settings.macd_signal_mode,
            seed=settings.forecast_seed,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
