"""
Engine configuration — Pydantic Settings.

Loads from .env with strict validation. Single source of truth
for every layout constant the geometry transformers rely on.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────────
    APP_NAME: str = "ChartGeometry"
    APP_ENV: str = "development"
    DEBUG: bool = False
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000

    # ── Logging ──────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── Pie layout ───────────────────────────────────────────────
    PIE_PADDING: float = 20
    DONUT_RATIO: float = 0.5

    # ── Cartesian layout (bar + line) ────────────────────────────
    PLOT_PADDING: float = 40
    CHART_WIDTH: float = 400
    BAR_FILL_RATIO: float = 0.8
    MAX_AXIS_TICKS: int = 6
    TICK_LABEL_OFFSET: float = 10
    VALUE_LABEL_OFFSET: float = 8

    # ── Output formatting ────────────────────────────────────────
    PATH_PRECISION: int = 4

    # ── Memoization ──────────────────────────────────────────────
    CACHE_ENABLED: bool = True
    CACHE_MAX_ENTRIES: int = 256


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
