"""
OPENWEATHERMAP INTEGRATION

Purpose:
- Fetch current weather and the 5-day / 3-hour forecast from OpenWeatherMap
- Convert provider payloads into WeatherSample-based records
- Assemble location reports, route conditions and travel-day forecasts
- Graceful degradation if API unavailable

Requirements:
• Never hardcode API keys (use OPENWEATHER_API_KEY)
• Timeout protection (WEATHER_API_TIMEOUT, 5s default)
• Graceful failure (log and return None)
• Cache responses to avoid rate limits (10 min default)
• Metric units: Celsius, km/h, km, percent
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd
import requests

from transit_weather.config import WeatherSettings, get_settings
from transit_weather.core.locations import WeatherLocation, get_location
from transit_weather.core.observations import CurrentConditions, DailyForecast, HourlyForecast
from transit_weather.core.weather_sample import WeatherSample
from transit_weather.intelligence.impact_classifier import (
    TransportationImpact,
    classify_current_conditions,
    classify_route,
)
from transit_weather.intelligence.risk_normalizer import normalize_score_payload, round_half_up
from transit_weather.intelligence.risk_profiler import profile_risk, radar_payload
from transit_weather.intelligence.safety_engine import assess_series
from transit_weather.intelligence.transport_analytics import (
    analyze_hourly,
    plan_travel_days,
    summarize_safety,
)

# Configure logging
logger = logging.getLogger(__name__)

MPS_TO_KMH = 3.6
DEFAULT_VISIBILITY_M = 10000

# In-memory cache: key -> (fetched_at, raw payload)
_weather_cache: Dict[str, Tuple[float, Dict[str, Any]]] = {}


@dataclass(frozen=True)
class WeatherReport:
    """Everything the dashboards need for one location."""
    current: CurrentConditions
    hourly: List[HourlyForecast]
    daily: List[DailyForecast]
    impact: TransportationImpact
    last_updated: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current": self.current.to_dict(),
            "hourly": [hour.to_dict() for hour in self.hourly],
            "daily": [day.to_dict() for day in self.daily],
            "transportation_impact": self.impact.to_dict(),
            "last_updated": self.last_updated.isoformat(),
        }


# ==================================================
# CACHE
# ==================================================

def _get_cache_key(kind: str, location: WeatherLocation) -> str:
    """Generate cache key from request kind and coordinates."""
    return f"{kind}_{round(location.lat, 2)}_{round(location.lon, 2)}"


def _get_from_cache(cache_key: str, cache_duration: float) -> Optional[Dict[str, Any]]:
    """Retrieve data from cache if still valid."""
    entry = _weather_cache.get(cache_key)
    if entry is None:
        return None

    timestamp, data = entry
    if time.time() - timestamp >= cache_duration:
        return None

    logger.info(f"Weather cache hit for {cache_key}")
    return data


def _save_to_cache(cache_key: str, data: Dict[str, Any]):
    _weather_cache[cache_key] = (time.time(), data)


def clear_weather_cache():
    """Clear weather cache. Use for testing or manual refresh."""
    _weather_cache.clear()
    logger.info("Weather cache cleared")


def get_cache_stats() -> Dict[str, Any]:
    return {
        "size": len(_weather_cache),
        "keys": list(_weather_cache.keys()),
    }


# ==================================================
# FETCH
# ==================================================

def _fetch(kind: str, endpoint: str, location: WeatherLocation,
           settings: WeatherSettings) -> Optional[Dict[str, Any]]:
    if not settings.api_key:
        logger.warning("OPENWEATHER_API_KEY not configured")
        return None

    cache_key = _get_cache_key(kind, location)
    cached = _get_from_cache(cache_key, settings.cache_duration)
    if cached is not None:
        return cached

    try:
        url = f"{settings.base_url}/{endpoint}"
        params = {
            "lat": location.lat,
            "lon": location.lon,
            "appid": settings.api_key,
            "units": "metric",  # Celsius, m/s
        }

        logger.info(f"Fetching {kind} weather for {location.name} ({location.lat}, {location.lon})")
        response = requests.get(url, params=params, timeout=settings.api_timeout)
        response.raise_for_status()

        data = response.json()

    except requests.exceptions.Timeout:
        logger.error(f"Weather API timeout for {location.name}")
        return None

    except requests.exceptions.RequestException as e:
        logger.error(f"Weather API error for {location.name}: {str(e)}")
        return None

    except ValueError as e:
        logger.error(f"Weather API returned invalid JSON for {location.name}: {str(e)}")
        return None

    _save_to_cache(cache_key, data)
    return data


def fetch_current_weather(location: WeatherLocation,
                          settings: Optional[WeatherSettings] = None) -> Optional[Dict[str, Any]]:
    """
    Fetch raw current weather.

    API Response includes:
    - weather[].main / description / icon
    - main.temp, main.feels_like, main.humidity, main.pressure
    - visibility: meters
    - wind.speed (m/s), wind.deg
    """
    return _fetch("current", "weather", location, settings or get_settings())


def fetch_forecast(location: WeatherLocation,
                   settings: Optional[WeatherSettings] = None) -> Optional[Dict[str, Any]]:
    """
    Fetch raw 5-day forecast (3-hour steps).

    API Response includes:
    - list[].dt (unix seconds), main.*, wind.*, visibility, pop (0-1), weather[]
    - city.timezone: offset from UTC in seconds
    """
    return _fetch("forecast", "forecast", location, settings or get_settings())


# ==================================================
# PARSE
# ==================================================

def _primary_condition(item: Dict[str, Any]) -> Dict[str, Any]:
    weather = item.get("weather") or [{}]
    return weather[0]


def _wind_mps(item: Dict[str, Any]) -> float:
    return (item.get("wind") or {}).get("speed") or 0


def _forecast_timezone(data: Dict[str, Any]) -> timezone:
    offset = (data.get("city") or {}).get("timezone") or 0
    return timezone(timedelta(seconds=offset))


def parse_current_weather(data: Dict[str, Any], location_name: str) -> CurrentConditions:
    """
    Convert a /weather payload into CurrentConditions.

    `sample` holds display values rounded half-up; `measured` keeps the
    converted readings so impact thresholds see e.g. 4.6 km, not 5.
    """
    main = data["main"]
    condition = _primary_condition(data)

    measured = WeatherSample(
        temperature_c=float(main["temp"]),
        humidity_pct=main.get("humidity", 0),
        wind_speed_kmh=_wind_mps(data) * MPS_TO_KMH,
        precipitation_chance_pct=0,
        visibility_km=(data.get("visibility") or DEFAULT_VISIBILITY_M) / 1000,
    )
    sample = WeatherSample(
        temperature_c=round_half_up(measured.temperature_c),
        humidity_pct=measured.humidity_pct,
        wind_speed_kmh=round_half_up(measured.wind_speed_kmh),
        precipitation_chance_pct=0,
        visibility_km=round_half_up(measured.visibility_km),
    )

    return CurrentConditions(
        location=location_name,
        sample=sample,
        feels_like_c=round_half_up(main.get("feels_like", main["temp"])),
        pressure_hpa=main.get("pressure", 0),
        wind_direction_deg=(data.get("wind") or {}).get("deg") or 0,
        condition=condition.get("main", "Unknown"),
        description=condition.get("description", ""),
        icon=condition.get("icon", ""),
        timestamp=datetime.now(timezone.utc),
        measured=measured,
    )


def parse_hourly_forecast(data: Dict[str, Any], limit: int = 24) -> List[HourlyForecast]:
    """
    Convert the first `limit` forecast steps into HourlyForecast records.

    Visibility is read per forecast step. The web dashboard copied the
    current visibility into every hour instead, so hourly safety scores
    can differ from its charts when visibility changes over the day.
    """
    tz = _forecast_timezone(data)
    hourly = []

    for item in data.get("list", [])[:limit]:
        main = item["main"]
        condition = _primary_condition(item)
        moment = datetime.fromtimestamp(item["dt"], tz)

        hourly.append(HourlyForecast(
            time=moment.strftime("%I:%M %p"),
            sample=WeatherSample(
                temperature_c=round_half_up(main["temp"]),
                humidity_pct=main.get("humidity", 0),
                wind_speed_kmh=round_half_up(_wind_mps(item) * MPS_TO_KMH),
                precipitation_chance_pct=round_half_up((item.get("pop") or 0) * 100),
                visibility_km=round_half_up((item.get("visibility") or DEFAULT_VISIBILITY_M) / 1000),
            ),
            feels_like_c=round_half_up(main.get("feels_like", main["temp"])),
            condition=condition.get("main", "Unknown"),
            icon=condition.get("icon", ""),
        ))

    return hourly


def parse_daily_forecast(data: Dict[str, Any], limit: int = 7) -> List[DailyForecast]:
    """
    Group forecast steps by local calendar date.

    Per day: max/min temperature, mean humidity, wind, precipitation
    chance and visibility, and the first step's condition.
    """
    tz = _forecast_timezone(data)
    rows = []
    for item in data.get("list", []):
        main = item["main"]
        condition = _primary_condition(item)
        rows.append({
            "date": datetime.fromtimestamp(item["dt"], tz).date(),
            "temp": main["temp"],
            "humidity": main.get("humidity", 0),
            "wind": _wind_mps(item),
            "pop": item.get("pop") or 0,
            "visibility": item.get("visibility") or DEFAULT_VISIBILITY_M,
            "condition": condition.get("main", "Unknown"),
            "description": condition.get("description", ""),
            "icon": condition.get("icon", ""),
        })

    if not rows:
        return []

    days = (
        pd.DataFrame(rows)
        .groupby("date", sort=False)
        .agg(
            temp_max=("temp", "max"),
            temp_min=("temp", "min"),
            humidity=("humidity", "mean"),
            wind=("wind", "mean"),
            pop=("pop", "mean"),
            visibility=("visibility", "mean"),
            condition=("condition", "first"),
            description=("description", "first"),
            icon=("icon", "first"),
        )
        .head(limit)
    )

    forecasts = []
    for day in days.itertuples():
        temp_max = round_half_up(float(day.temp_max))
        temp_min = round_half_up(float(day.temp_min))
        forecasts.append(DailyForecast(
            date=day.Index.isoformat(),
            day=day.Index.strftime("%A"),
            temp_max_c=temp_max,
            temp_min_c=temp_min,
            sample=WeatherSample(
                temperature_c=round_half_up((temp_max + temp_min) / 2),
                humidity_pct=round_half_up(float(day.humidity)),
                wind_speed_kmh=round_half_up(float(day.wind) * MPS_TO_KMH),
                precipitation_chance_pct=round_half_up(float(day.pop) * 100),
                visibility_km=round_half_up(float(day.visibility) / 1000),
            ),
            condition=day.condition,
            description=day.description,
            icon=day.icon,
        ))

    return forecasts


# ==================================================
# LOCATION-LEVEL OPERATIONS
# ==================================================

def _resolve(location_name: str) -> Optional[WeatherLocation]:
    location = get_location(location_name)
    if location is None:
        logger.warning(f"Location {location_name} not found")
    return location


def get_current_weather(location_name: str) -> Optional[CurrentConditions]:
    """
    Current conditions for a supported location.

    Returns:
        CurrentConditions or None if the location is unknown or the API failed
    """
    location = _resolve(location_name)
    if location is None:
        return None

    data = fetch_current_weather(location)
    if data is None:
        return None

    try:
        return parse_current_weather(data, location.name)
    except (KeyError, TypeError, IndexError) as e:
        logger.error(f"Malformed current weather payload for {location.name}: {str(e)}")
        return None


def get_weather_report(location_name: str) -> Optional[WeatherReport]:
    """
    Current conditions, hourly and daily forecast and transportation impact.

    Returns None if the location is unknown or either API call failed.
    """
    location = _resolve(location_name)
    if location is None:
        return None

    settings = get_settings()
    current_data = fetch_current_weather(location, settings)
    forecast_data = fetch_forecast(location, settings)

    if current_data is None or forecast_data is None:
        logger.warning(f"Weather report unavailable for {location.name}")
        return None

    try:
        current = parse_current_weather(current_data, location.name)
        hourly = parse_hourly_forecast(forecast_data, settings.hourly_limit)
        daily = parse_daily_forecast(forecast_data, settings.daily_limit)
    except (KeyError, TypeError, IndexError) as e:
        logger.error(f"Malformed weather payload for {location.name}: {str(e)}")
        return None

    return WeatherReport(
        current=current,
        hourly=hourly,
        daily=daily,
        impact=classify_current_conditions(current.condition, current.impact_sample),
        last_updated=datetime.now(timezone.utc),
    )


def risk_overview(report: WeatherReport) -> Dict[str, Any]:
    """
    Risk dashboard payload for a report.

    - safety: per-hour safety score and delay risk
    - risk_profile: five-factor vector (unrounded)
    - radar: rounded radar rows incl. OverallRisk
    - analytics: safe / risky hours
    - summary: safety series summary, plus a colored badge
    """
    hourly_samples = [hour.sample for hour in report.hourly]
    assessments = assess_series(hourly_samples)
    factors = profile_risk(report.current.sample, hourly_samples)
    summary = summarize_safety(assessments)

    return {
        "location": report.current.location,
        "safety": [
            {"time": hour.time, **assessment.to_dict()}
            for hour, assessment in zip(report.hourly, assessments)
        ],
        "risk_profile": [factor.to_dict() for factor in factors],
        "radar": radar_payload(factors, report.impact),
        "analytics": analyze_hourly(report.hourly).to_dict(),
        "summary": summary,
        "safety_badge": normalize_score_payload(summary["mean_safety_score"], summary["level"]),
        "transportation_impact": report.impact.to_dict(),
    }


def get_multi_location_weather(location_names: Iterable[str]) -> Dict[str, CurrentConditions]:
    """Current conditions per location; failed lookups are left out."""
    weather = {}
    for name in location_names:
        current = get_current_weather(name)
        if current is not None:
            weather[name] = current
    return weather


def get_route_weather(start_location: str, end_location: str) -> Dict[str, Any]:
    """
    Conditions at both ends of a route and the combined assessment.

    Returns:
        dict: {start, end, route_conditions}; start/end may be None
    """
    start = get_current_weather(start_location)
    end = get_current_weather(end_location)

    return {
        "start": start,
        "end": end,
        "route_conditions": classify_route(start, end),
    }


def get_transportation_forecast(location_name: str, days: int = 7) -> Optional[Dict[str, Any]]:
    """
    Daily forecast with best / caution travel days.

    Returns:
        dict: {location, forecast, transportation_advice, best_travel_days,
        caution_days} or None if weather is unavailable
    """
    report = get_weather_report(location_name)
    if report is None:
        return None

    forecast = report.daily[:days]
    plan = plan_travel_days(forecast)

    return {
        "location": location_name,
        "forecast": forecast,
        "transportation_advice": list(plan.advice),
        "best_travel_days": list(plan.best_days),
        "caution_days": list(plan.caution_days),
    }
