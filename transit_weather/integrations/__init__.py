"""
Integrations Package

External weather provider integrations.
"""

from transit_weather.integrations.openweather import (
    WeatherReport,
    get_current_weather,
    get_weather_report,
    get_multi_location_weather,
    get_route_weather,
    get_transportation_forecast,
    risk_overview,
    clear_weather_cache,
    get_cache_stats,
)

__all__ = [
    'WeatherReport',
    'get_current_weather',
    'get_weather_report',
    'get_multi_location_weather',
    'get_route_weather',
    'get_transportation_forecast',
    'risk_overview',
    'clear_weather_cache',
    'get_cache_stats',
]
