"""
TRANSPORTATION IMPACT CLASSIFIER

Purpose:
- Map numeric safety scores onto the ordinal impact scale
- Classify current conditions for one location (rule based + safety score)
- Classify a route from its start and end conditions
- Attach operator recommendations and alerts

Impact scale (best -> worst):
    excellent, good, fair, poor, dangerous

Requirements:
• Never raise on degenerate numbers (NaN -> dangerous)
• Worst signal wins when rules and numeric score disagree
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from transit_weather.core.observations import CurrentConditions
from transit_weather.core.weather_sample import WeatherSample
from transit_weather.intelligence.risk_normalizer import is_nan
from transit_weather.intelligence.safety_engine import assess_sample

logger = logging.getLogger(__name__)

# ==================================================
# ORDINAL SCALES
# ==================================================

IMPACT_LEVELS: Tuple[str, ...] = ("excellent", "good", "fair", "poor", "dangerous")
VISIBILITY_LEVELS: Tuple[str, ...] = ("excellent", "good", "reduced", "poor")
ROAD_CONDITION_LEVELS: Tuple[str, ...] = ("excellent", "good", "wet", "hazardous")
DELAY_RISK_LEVELS: Tuple[str, ...] = ("none", "low", "moderate", "high")

# Radar "Overall Risk" value per impact level
OVERALL_RISK_VALUES: Dict[str, int] = {
    "excellent": 10,
    "good": 30,
    "fair": 50,
    "poor": 80,
    "dangerous": 95,
}

# Upper delay-risk bound per level (midpoints between OVERALL_RISK_VALUES)
_DELAY_RISK_UPPER_BOUNDS: List[Tuple[float, str]] = [
    (20.0, "excellent"),
    (40.0, "good"),
    (65.0, "fair"),
    (87.5, "poor"),
]

_DELAY_RISK_BY_IMPACT: Dict[str, str] = {
    "excellent": "none",
    "good": "low",
    "fair": "moderate",
    "poor": "high",
    "dangerous": "high",
}

HIGH_WIND_KMH = 40.0
ROUTE_WIND_KMH = 30.0
REDUCED_VISIBILITY_KM = 5.0
HIGH_HUMIDITY_PCT = 90.0


@dataclass(frozen=True)
class TransportationImpact:
    overall: str
    visibility: str
    road_conditions: str
    delay_risk: str
    recommendations: Tuple[str, ...] = field(default_factory=tuple)
    alerts: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "visibility": self.visibility,
            "road_conditions": self.road_conditions,
            "delay_risk": self.delay_risk,
            "recommendations": list(self.recommendations),
            "alerts": list(self.alerts),
        }


def worse_level(a: str, b: str, scale: Tuple[str, ...] = IMPACT_LEVELS) -> str:
    """Return whichever of a, b sits later on the scale."""
    return a if scale.index(a) >= scale.index(b) else b


def overall_risk_value(level: str) -> int:
    """Radar value for an impact level; unknown levels count as dangerous."""
    return OVERALL_RISK_VALUES.get(level, OVERALL_RISK_VALUES["dangerous"])


def classify_safety_score(safety_score: float) -> str:
    """
    Convert a safety score (0-100, 100 = safest) into an impact level.

    Args:
        safety_score: Output of the safety engine

    Returns:
        str: One of IMPACT_LEVELS
    """
    if is_nan(safety_score):
        logger.warning("NaN safety score, classifying as dangerous")
        return "dangerous"

    delay_risk = 100 - safety_score
    for upper_bound, level in _DELAY_RISK_UPPER_BOUNDS:
        if delay_risk <= upper_bound:
            return level
    return "dangerous"


def classify_current_conditions(condition: str, sample: WeatherSample) -> TransportationImpact:
    """
    Assess transportation impact of the current weather at one location.

    Args:
        condition: Provider condition group or description ("Rain", "Mist", ...)
        sample: Current weather sample

    Returns:
        TransportationImpact
    """
    condition = (condition or "").lower()

    overall = "excellent"
    visibility = "excellent"
    road_conditions = "excellent"
    delay_risk = "none"
    recommendations: List[str] = []
    alerts: List[str] = []

    is_wet = "rain" in condition or "storm" in condition

    if is_wet:
        overall = "poor"
        road_conditions = "wet"
        delay_risk = "high"
        recommendations.append("Allow extra travel time")
        recommendations.append("Use headlights during the day")
        alerts.append("Wet road conditions expected")

    if "fog" in condition or "mist" in condition:
        visibility = "poor"
        overall = "poor"
        delay_risk = "high"
        recommendations.append("Drive with extreme caution")
        recommendations.append("Use fog lights if available")
        alerts.append("Reduced visibility due to fog")

    if sample.wind_speed_kmh > HIGH_WIND_KMH:
        overall = "fair" if overall == "excellent" else "poor"
        delay_risk = "moderate" if delay_risk == "none" else "high"
        recommendations.append("High winds - avoid high-profile vehicles")
        alerts.append("Strong wind conditions")

    if sample.visibility_km < REDUCED_VISIBILITY_KM:
        visibility = worse_level(visibility, "reduced", VISIBILITY_LEVELS)
        if overall == "excellent":
            overall = "good"

    if sample.humidity_pct > HIGH_HUMIDITY_PCT and "rain" not in condition:
        recommendations.append("High humidity - ensure vehicle ventilation")

    score_level = classify_safety_score(assess_sample(sample).safety_score)
    if worse_level(overall, score_level) != overall:
        logger.info(f"Safety score escalates impact from {overall} to {score_level}")
        overall = score_level
        delay_risk = worse_level(delay_risk, _DELAY_RISK_BY_IMPACT[overall], DELAY_RISK_LEVELS)
        if overall == "dangerous":
            if is_wet:
                road_conditions = "hazardous"
            alerts.append("Dangerous travel conditions - consider postponing non-essential trips")

    if overall == "excellent":
        recommendations.append("Perfect conditions for travel")

    return TransportationImpact(
        overall=overall,
        visibility=visibility,
        road_conditions=road_conditions,
        delay_risk=delay_risk,
        recommendations=tuple(recommendations),
        alerts=tuple(alerts),
    )


def classify_route(
    start: Optional[CurrentConditions],
    end: Optional[CurrentConditions],
) -> TransportationImpact:
    """
    Assess a route from the conditions at both ends (worst case wins).

    Returns a neutral "fair" assessment when either end is unknown.
    """
    if start is None or end is None:
        logger.warning("Route weather incomplete, returning neutral assessment")
        return TransportationImpact(
            overall="fair",
            visibility="good",
            road_conditions="good",
            delay_risk="low",
            recommendations=("Weather data unavailable for complete route analysis",),
            alerts=("Check local conditions before departure",),
        )

    conditions = [start.condition.lower(), end.condition.lower()]
    max_wind = max(start.wind_speed_kmh, end.wind_speed_kmh)
    min_visibility = min(start.visibility_km, end.visibility_km)

    overall = "excellent"
    recommendations: List[str] = []
    alerts: List[str] = []

    if any("rain" in c or "storm" in c for c in conditions):
        overall = "poor"
        recommendations.append("Rain expected along route - plan accordingly")
        alerts.append("Wet conditions on route")

    if max_wind > ROUTE_WIND_KMH:
        if overall == "excellent":
            overall = "good"
        recommendations.append("Windy conditions along route")

    if min_visibility < REDUCED_VISIBILITY_KM:
        overall = "poor"
        alerts.append("Poor visibility expected on route")

    recommendations.append(f"Start: {start.temperature_c:g}°C in {start.location}")
    recommendations.append(f"End: {end.temperature_c:g}°C in {end.location}")

    if overall == "poor":
        delay_risk = "high"
    elif overall == "good":
        delay_risk = "moderate"
    else:
        delay_risk = "low"

    return TransportationImpact(
        overall=overall,
        visibility="good" if min_visibility > REDUCED_VISIBILITY_KM else "poor",
        road_conditions="wet" if any("rain" in c for c in conditions) else "good",
        delay_risk=delay_risk,
        recommendations=tuple(recommendations),
        alerts=tuple(alerts),
    )
