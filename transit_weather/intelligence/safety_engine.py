"""
TRANSPORTATION SAFETY SCORE ENGINE

Purpose:
- Combine the weather dimensions of one sample into a safety score (0-100)
- Derive delay risk as the complement of the safety score
- Score whole hourly/daily series, as records or as a DataFrame

Requirements:
• Deterministic, never raises
• All deductions applied to one accumulator, single clamp at the end
• No temporal smoothing: each sample is scored independently
• NaN in any field -> worst case (safety 0, delay risk 100)

Deductions (only when the threshold is crossed):
- precipitation chance > 30 %   : chance * 0.8
- wind speed > 25 km/h          : (wind - 25) * 2
- visibility < 5 km             : (5 - visibility) * 10
- temperature < 5 C or > 35 C   : |temperature - 20| * 2
"""

import logging
from typing import Iterable, List

import numpy as np
import pandas as pd

from transit_weather.core.weather_sample import SafetyAssessment, WeatherSample
from transit_weather.intelligence.risk_normalizer import clamp, is_nan

logger = logging.getLogger(__name__)

MAX_SAFETY_SCORE = 100.0

PRECIPITATION_THRESHOLD_PCT = 30.0
PRECIPITATION_WEIGHT = 0.8
WIND_THRESHOLD_KMH = 25.0
WIND_WEIGHT = 2.0
VISIBILITY_THRESHOLD_KM = 5.0
VISIBILITY_WEIGHT = 10.0
COLD_THRESHOLD_C = 5.0
HEAT_THRESHOLD_C = 35.0
TEMPERATURE_BASELINE_C = 20.0
TEMPERATURE_WEIGHT = 2.0

SAMPLE_COLUMNS = [
    "temperature_c",
    "humidity_pct",
    "wind_speed_kmh",
    "precipitation_chance_pct",
    "visibility_km",
]

_WORST_CASE = SafetyAssessment(safety_score=0.0, delay_risk=MAX_SAFETY_SCORE)


def _raw_safety_score(sample: WeatherSample) -> float:
    # Unclamped: deductions only, clamp applied once by the caller
    score = MAX_SAFETY_SCORE

    if sample.precipitation_chance_pct > PRECIPITATION_THRESHOLD_PCT:
        score -= sample.precipitation_chance_pct * PRECIPITATION_WEIGHT

    if sample.wind_speed_kmh > WIND_THRESHOLD_KMH:
        score -= (sample.wind_speed_kmh - WIND_THRESHOLD_KMH) * WIND_WEIGHT

    if sample.visibility_km < VISIBILITY_THRESHOLD_KM:
        score -= (VISIBILITY_THRESHOLD_KM - sample.visibility_km) * VISIBILITY_WEIGHT

    if sample.temperature_c < COLD_THRESHOLD_C or sample.temperature_c > HEAT_THRESHOLD_C:
        score -= abs(sample.temperature_c - TEMPERATURE_BASELINE_C) * TEMPERATURE_WEIGHT

    return score


def assess_sample(sample: WeatherSample) -> SafetyAssessment:
    """
    Score one weather sample.

    Args:
        sample: Hourly or daily weather record

    Returns:
        SafetyAssessment with safety_score and delay_risk in [0, 100]
        and safety_score + delay_risk == 100
    """
    if any(is_nan(value) for value in sample.to_dict().values()):
        logger.warning("NaN field in weather sample, using worst-case safety score")
        return _WORST_CASE

    safety_score = clamp(_raw_safety_score(sample), 0.0, MAX_SAFETY_SCORE)

    return SafetyAssessment(
        safety_score=safety_score,
        delay_risk=MAX_SAFETY_SCORE - safety_score,
    )


def assess_series(samples: Iterable[WeatherSample]) -> List[SafetyAssessment]:
    """One assessment per sample, same order."""
    return [assess_sample(sample) for sample in samples]


def samples_to_frame(samples: Iterable[WeatherSample]) -> pd.DataFrame:
    return pd.DataFrame(
        [sample.to_dict() for sample in samples],
        columns=SAMPLE_COLUMNS,
    )


def assess_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Vectorised assess_sample over a DataFrame.

    Args:
        frame: DataFrame with the five snake_case sample columns.
            Missing columns are treated as 0.

    Returns:
        Copy of frame with safety_score and delay_risk columns added.
    """
    result = frame.copy()

    def column(name: str) -> np.ndarray:
        if name not in frame.columns:
            return np.zeros(len(frame), dtype=float)
        return frame[name].to_numpy(dtype=float)

    precipitation = column("precipitation_chance_pct")
    wind = column("wind_speed_kmh")
    visibility = column("visibility_km")
    temperature = column("temperature_c")
    humidity = column("humidity_pct")

    # Subtraction order matches _raw_safety_score; inactive terms subtract 0.0
    with np.errstate(invalid="ignore"):
        score = np.full(len(frame), MAX_SAFETY_SCORE, dtype=float)
        score = score - np.where(precipitation > PRECIPITATION_THRESHOLD_PCT,
                                 precipitation * PRECIPITATION_WEIGHT, 0.0)
        score = score - np.where(wind > WIND_THRESHOLD_KMH,
                                 (wind - WIND_THRESHOLD_KMH) * WIND_WEIGHT, 0.0)
        score = score - np.where(visibility < VISIBILITY_THRESHOLD_KM,
                                 (VISIBILITY_THRESHOLD_KM - visibility) * VISIBILITY_WEIGHT, 0.0)
        score = score - np.where((temperature < COLD_THRESHOLD_C) | (temperature > HEAT_THRESHOLD_C),
                                 np.abs(temperature - TEMPERATURE_BASELINE_C) * TEMPERATURE_WEIGHT, 0.0)
        safety = np.clip(score, 0.0, MAX_SAFETY_SCORE)

    has_nan = (
        np.isnan(precipitation) | np.isnan(wind) | np.isnan(visibility)
        | np.isnan(temperature) | np.isnan(humidity)
    )
    if has_nan.any():
        logger.warning(f"{int(has_nan.sum())} row(s) with NaN fields, using worst-case safety score")
    safety = np.where(has_nan, 0.0, safety)

    result["safety_score"] = safety
    result["delay_risk"] = MAX_SAFETY_SCORE - safety
    return result
