from .weather_sample import (
    WeatherSample,
    SafetyAssessment,
    RiskFactor,
    RISK_FACTOR_NAMES,
)
from .locations import WeatherLocation, get_location, get_all_locations

__all__ = [
    'WeatherSample',
    'SafetyAssessment',
    'RiskFactor',
    'RISK_FACTOR_NAMES',
    'WeatherLocation',
    'get_location',
    'get_all_locations',
]
