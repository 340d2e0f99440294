"""
Transportation weather risk scoring.

Converts hourly/daily weather samples into safety scores, delay risk,
multi-factor risk profiles and transportation impact levels.
"""

from transit_weather.core.weather_sample import (
    WeatherSample,
    SafetyAssessment,
    RiskFactor,
    RISK_FACTOR_NAMES,
)
from transit_weather.intelligence.risk_factors import (
    wind_risk,
    rain_risk,
    visibility_risk,
    temperature_risk,
    humidity_risk,
)
from transit_weather.intelligence.safety_engine import assess_sample, assess_series
from transit_weather.intelligence.risk_profiler import profile_risk
from transit_weather.intelligence.impact_classifier import (
    TransportationImpact,
    classify_safety_score,
)

__version__ = "0.1.0"

__all__ = [
    'WeatherSample',
    'SafetyAssessment',
    'RiskFactor',
    'RISK_FACTOR_NAMES',
    'wind_risk',
    'rain_risk',
    'visibility_risk',
    'temperature_risk',
    'humidity_risk',
    'assess_sample',
    'assess_series',
    'profile_risk',
    'TransportationImpact',
    'classify_safety_score',
]
