"""
MULTI-FACTOR RISK PROFILER

Purpose:
- Build the fixed five-factor risk vector behind the risk radar
- Mix instantaneous (current snapshot) and averaged (hourly series) signals
- Produce a UI-ready radar payload

Requirements:
• Output order is fixed: Wind, Rain, Visibility, Temperature, Humidity
• Rain risk is the only factor drawn from the series mean
• Factor values are not clamped
"""

from typing import Any, Dict, List, Optional, Sequence

from transit_weather.core.weather_sample import (
    HUMIDITY_RISK,
    RAIN_RISK,
    TEMPERATURE_RISK,
    VISIBILITY_RISK,
    WIND_RISK,
    RiskFactor,
    WeatherSample,
)
from transit_weather.intelligence.impact_classifier import (
    TransportationImpact,
    overall_risk_value,
)
from transit_weather.intelligence.risk_factors import (
    humidity_risk,
    rain_risk,
    temperature_risk,
    visibility_risk,
    wind_risk,
)
from transit_weather.intelligence.risk_normalizer import round_half_up

OVERALL_RISK = "OverallRisk"
RADAR_FULL_MARK = 100


def profile_risk(current: WeatherSample, hourly_series: Sequence[WeatherSample]) -> List[RiskFactor]:
    """
    Compute the five-factor risk vector.

    Args:
        current: Current-conditions snapshot
        hourly_series: Hourly forecast used for the rain average

    Returns:
        list: Exactly five RiskFactor entries in radar order
    """
    return [
        RiskFactor(WIND_RISK, wind_risk(current.wind_speed_kmh)),
        RiskFactor(RAIN_RISK, rain_risk(hourly_series)),
        RiskFactor(VISIBILITY_RISK, visibility_risk(current.visibility_km)),
        RiskFactor(TEMPERATURE_RISK, temperature_risk(current.temperature_c)),
        RiskFactor(HUMIDITY_RISK, humidity_risk(current.humidity_pct)),
    ]


def radar_payload(
    factors: Sequence[RiskFactor],
    impact: Optional[TransportationImpact] = None,
) -> List[Dict[str, Any]]:
    """
    UI-ready radar rows: {risk, value, full_mark}.

    Values are rounded for display only. When an impact assessment is
    given, an OverallRisk row is appended after the five factors.
    """
    rows = [
        {
            "risk": factor.name,
            "value": round_half_up(factor.value),
            "full_mark": RADAR_FULL_MARK,
        }
        for factor in factors
    ]

    if impact is not None:
        rows.append({
            "risk": OVERALL_RISK,
            "value": overall_risk_value(impact.overall),
            "full_mark": RADAR_FULL_MARK,
        })

    return rows
