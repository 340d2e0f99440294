"""
RISK FACTOR CALCULATOR

Purpose:
- Convert one weather dimension into a numeric risk contribution
- Deviation-from-comfort or saturating-ramp model per dimension
- Feed the multi-factor radar profile

Requirements:
• Pure functions, no IO, never raise
• Per-factor clamping reproduced exactly (some saturate, some do not)
• NaN input is treated as worst case (100)
"""

import logging
from typing import Iterable

from transit_weather.core.weather_sample import WeatherSample
from transit_weather.intelligence.risk_normalizer import WORST_CASE_RISK, is_nan

logger = logging.getLogger(__name__)

# Saturation / comfort baselines
WIND_SATURATION_KMH = 50.0
CLEAR_VISIBILITY_KM = 10.0
COMFORT_TEMPERATURE_C = 25.0
TEMPERATURE_RISK_PER_DEGREE = 4.0
COMFORT_HUMIDITY_PCT = 60.0
HUMIDITY_RISK_PER_PERCENT = 1.67


def wind_risk(wind_speed_kmh: float) -> float:
    """
    Linear ramp saturating at 100 for wind >= 50 km/h.

    Not floored: negative wind gives negative risk.
    """
    if is_nan(wind_speed_kmh):
        logger.warning("NaN wind speed, using worst-case wind risk")
        return WORST_CASE_RISK
    return min(100.0, (wind_speed_kmh / WIND_SATURATION_KMH) * 100)


def rain_risk(samples: Iterable[WeatherSample]) -> float:
    """
    Mean precipitation chance across the whole series.

    Series-level factor. Empty series -> 0.
    NaN precipitation values count as 100.
    """
    total = 0.0
    count = 0
    for sample in samples:
        chance = sample.precipitation_chance_pct
        if is_nan(chance):
            logger.warning("NaN precipitation chance in series, counting as 100")
            chance = WORST_CASE_RISK
        total += chance
        count += 1

    if count == 0:
        return 0.0
    return total / count


def visibility_risk(visibility_km: float) -> float:
    """
    0 at >= 10 km, 100 at 0 km. Floored at 0, not capped.
    """
    if is_nan(visibility_km):
        logger.warning("NaN visibility, using worst-case visibility risk")
        return WORST_CASE_RISK
    return max(0.0, 100 - (visibility_km / CLEAR_VISIBILITY_KM) * 100)


def temperature_risk(temperature_c: float) -> float:
    """
    Distance from the 25 C comfort baseline, 4 points per degree.

    Unclamped: readings beyond 0 C / 50 C exceed 100.
    """
    if is_nan(temperature_c):
        logger.warning("NaN temperature, using worst-case temperature risk")
        return WORST_CASE_RISK
    return abs(temperature_c - COMFORT_TEMPERATURE_C) * TEMPERATURE_RISK_PER_DEGREE


def humidity_risk(humidity_pct: float) -> float:
    """Distance from 60 % humidity, 1.67 points per percent. Unclamped."""
    if is_nan(humidity_pct):
        logger.warning("NaN humidity, using worst-case humidity risk")
        return WORST_CASE_RISK
    return abs(humidity_pct - COMFORT_HUMIDITY_PCT) * HUMIDITY_RISK_PER_PERCENT
