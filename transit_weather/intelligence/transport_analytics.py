"""
TRANSPORTATION WEATHER ANALYTICS

Purpose:
- Count safe vs risky hours in an hourly forecast
- Estimate delay probability from the share of risky hours
- Suggest departure times to prefer / avoid
- Pick best and caution days from a daily forecast
- Summarise a series of safety assessments

Requirements:
• Pure functions over already-fetched forecasts
• Empty input -> neutral result, never raise
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from transit_weather.core.observations import DailyForecast, HourlyForecast
from transit_weather.core.weather_sample import SafetyAssessment, WeatherSample
from transit_weather.intelligence.impact_classifier import classify_safety_score
from transit_weather.intelligence.risk_normalizer import is_nan, round_half_up

MAX_SUGGESTED_TIMES = 3

# Hourly thresholds
SAFE_PRECIPITATION_PCT = 30.0
SAFE_WIND_KMH = 25.0
RECOMMENDED_PRECIPITATION_PCT = 20.0
RECOMMENDED_WIND_KMH = 20.0
AVOID_PRECIPITATION_PCT = 60.0
AVOID_WIND_KMH = 35.0

# Daily thresholds
BEST_DAY_PRECIPITATION_PCT = 20.0
BEST_DAY_WIND_KMH = 25.0
CAUTION_DAY_PRECIPITATION_PCT = 60.0
CAUTION_DAY_WIND_KMH = 40.0


@dataclass(frozen=True)
class TransportationAnalytics:
    safe_hours: int
    risky_hours: int
    delay_probability: int
    recommended_times: Tuple[str, ...] = field(default_factory=tuple)
    avoid_times: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "safe_hours": self.safe_hours,
            "risky_hours": self.risky_hours,
            "delay_probability": self.delay_probability,
            "recommended_times": list(self.recommended_times),
            "avoid_times": list(self.avoid_times),
        }


@dataclass(frozen=True)
class TravelPlan:
    best_days: Tuple[str, ...]
    caution_days: Tuple[str, ...]
    advice: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "best_days": list(self.best_days),
            "caution_days": list(self.caution_days),
            "advice": list(self.advice),
        }


def _is_safe_hour(sample: WeatherSample) -> bool:
    return (
        sample.precipitation_chance_pct < SAFE_PRECIPITATION_PCT
        and sample.wind_speed_kmh < SAFE_WIND_KMH
    )


def _is_recommended_hour(sample: WeatherSample) -> bool:
    return (
        sample.precipitation_chance_pct < RECOMMENDED_PRECIPITATION_PCT
        and sample.wind_speed_kmh < RECOMMENDED_WIND_KMH
    )


def _is_avoid_hour(sample: WeatherSample) -> bool:
    # NaN readings are treated as worst case
    if is_nan(sample.precipitation_chance_pct) or is_nan(sample.wind_speed_kmh):
        return True
    return (
        sample.precipitation_chance_pct > AVOID_PRECIPITATION_PCT
        or sample.wind_speed_kmh > AVOID_WIND_KMH
    )


def analyze_hourly(hourly: Sequence[HourlyForecast]) -> TransportationAnalytics:
    """
    Safe/risky hour breakdown of an hourly forecast.

    Args:
        hourly: Hourly forecast (typically 24 entries)

    Returns:
        TransportationAnalytics; delay_probability is the risky share
        of the series as a rounded percentage (0 for an empty series)
    """
    total = len(hourly)
    if total == 0:
        return TransportationAnalytics(safe_hours=0, risky_hours=0, delay_probability=0)

    safe_hours = sum(1 for hour in hourly if _is_safe_hour(hour.sample))
    risky_hours = total - safe_hours

    recommended = [hour.time for hour in hourly if _is_recommended_hour(hour.sample)]
    avoid = [hour.time for hour in hourly if _is_avoid_hour(hour.sample)]

    return TransportationAnalytics(
        safe_hours=safe_hours,
        risky_hours=risky_hours,
        delay_probability=round_half_up(risky_hours / total * 100),
        recommended_times=tuple(recommended[:MAX_SUGGESTED_TIMES]),
        avoid_times=tuple(avoid[:MAX_SUGGESTED_TIMES]),
    )


def _day_label(index: int, day: DailyForecast) -> str:
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return day.day


def plan_travel_days(daily: Sequence[DailyForecast]) -> TravelPlan:
    """Best and caution days of a daily forecast, with advice lines."""
    best_days: List[str] = []
    caution_days: List[str] = []

    for index, day in enumerate(daily):
        label = _day_label(index, day)
        sample = day.sample

        if (sample.precipitation_chance_pct < BEST_DAY_PRECIPITATION_PCT
                and sample.wind_speed_kmh < BEST_DAY_WIND_KMH):
            best_days.append(label)

        if (sample.precipitation_chance_pct > CAUTION_DAY_PRECIPITATION_PCT
                or sample.wind_speed_kmh > CAUTION_DAY_WIND_KMH):
            caution_days.append(label)

    advice: List[str] = []
    if best_days:
        advice.append(f"Best travel days: {', '.join(best_days)}")
    if caution_days:
        advice.append(f"Exercise caution: {', '.join(caution_days)}")
    advice.append("Check real-time conditions before departure")
    advice.append("Monitor weather updates during travel")

    return TravelPlan(
        best_days=tuple(best_days),
        caution_days=tuple(caution_days),
        advice=tuple(advice),
    )


def summarize_safety(assessments: Sequence[SafetyAssessment]) -> Dict[str, Any]:
    """
    Min / mean / max safety score of a series and the level of the mean.

    Empty series -> neutral "fair" summary with zero samples.
    """
    if not assessments:
        return {
            "samples": 0,
            "min_safety_score": 0.0,
            "mean_safety_score": 0.0,
            "max_safety_score": 0.0,
            "mean_delay_risk": 0.0,
            "level": "fair",
        }

    scores = [a.safety_score for a in assessments]
    mean_score = sum(scores) / len(scores)

    return {
        "samples": len(scores),
        "min_safety_score": min(scores),
        "mean_safety_score": round(mean_score, 2),
        "max_safety_score": max(scores),
        "mean_delay_risk": round(100 - mean_score, 2),
        "level": classify_safety_score(mean_score),
    }
