"""
Runtime configuration for the weather integration.

All values come from the environment; API keys are never hard-coded.
Read at call time so a changed environment takes effect without re-import.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_API_TIMEOUT = 5  # seconds
DEFAULT_CACHE_DURATION = 600  # 10 minutes
DEFAULT_HOURLY_LIMIT = 24
DEFAULT_DAILY_LIMIT = 7


@dataclass(frozen=True)
class WeatherSettings:
    api_key: Optional[str]
    base_url: str
    api_timeout: float
    cache_duration: float
    hourly_limit: int
    daily_limit: int


def _env_number(name: str, default, cast, positive: bool = False):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using default {default}")
        return default

    if positive and value <= 0:
        logger.warning(f"{name} must be positive, got {raw!r}, using default {default}")
        return default
    return value


def get_settings() -> WeatherSettings:
    return WeatherSettings(
        api_key=os.getenv("OPENWEATHER_API_KEY") or None,
        base_url=os.getenv("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        api_timeout=_env_number("WEATHER_API_TIMEOUT", DEFAULT_API_TIMEOUT, float),
        cache_duration=_env_number("WEATHER_CACHE_DURATION", DEFAULT_CACHE_DURATION, float),
        hourly_limit=_env_number("WEATHER_HOURLY_LIMIT", DEFAULT_HOURLY_LIMIT, int, positive=True),
        daily_limit=_env_number("WEATHER_DAILY_LIMIT", DEFAULT_DAILY_LIMIT, int, positive=True),
    )
