from .risk_factors import (
    wind_risk,
    rain_risk,
    visibility_risk,
    temperature_risk,
    humidity_risk,
)
from .safety_engine import assess_sample, assess_series, assess_frame, samples_to_frame
from .impact_classifier import (
    IMPACT_LEVELS,
    TransportationImpact,
    classify_safety_score,
    classify_current_conditions,
    classify_route,
    overall_risk_value,
)
from .risk_profiler import profile_risk, radar_payload
from .transport_analytics import (
    TransportationAnalytics,
    TravelPlan,
    analyze_hourly,
    plan_travel_days,
    summarize_safety,
)

__all__ = [
    'wind_risk',
    'rain_risk',
    'visibility_risk',
    'temperature_risk',
    'humidity_risk',
    'assess_sample',
    'assess_series',
    'assess_frame',
    'samples_to_frame',
    'IMPACT_LEVELS',
    'TransportationImpact',
    'classify_safety_score',
    'classify_current_conditions',
    'classify_route',
    'overall_risk_value',
    'profile_risk',
    'radar_payload',
    'TransportationAnalytics',
    'TravelPlan',
    'analyze_hourly',
    'plan_travel_days',
    'summarize_safety',
]
