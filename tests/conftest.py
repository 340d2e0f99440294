from datetime import datetime, timezone

import pytest

from transit_weather.core.observations import CurrentConditions, DailyForecast, HourlyForecast
from transit_weather.core.weather_sample import WeatherSample
from transit_weather.integrations.openweather import clear_weather_cache

# 2026-01-01T00:00:00Z
BASE_EPOCH = 1767225600
SRI_LANKA_OFFSET = 19800  # +05:30


@pytest.fixture(autouse=True)
def _isolate_weather_environment(monkeypatch):
    for name in (
        "OPENWEATHER_API_KEY",
        "OPENWEATHER_BASE_URL",
        "WEATHER_API_TIMEOUT",
        "WEATHER_CACHE_DURATION",
        "WEATHER_HOURLY_LIMIT",
        "WEATHER_DAILY_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_weather_cache()
    yield
    clear_weather_cache()


def make_sample(temperature=20.0, humidity=60.0, wind=0.0, precipitation=0.0, visibility=10.0):
    return WeatherSample(
        temperature_c=temperature,
        humidity_pct=humidity,
        wind_speed_kmh=wind,
        precipitation_chance_pct=precipitation,
        visibility_km=visibility,
    )


def make_current(location="Colombo", condition="Clear", **sample_fields):
    return CurrentConditions(
        location=location,
        sample=make_sample(**sample_fields),
        feels_like_c=sample_fields.get("temperature", 20.0),
        pressure_hpa=1010,
        wind_direction_deg=0,
        condition=condition,
        description=condition.lower(),
        icon="01d",
        timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


def make_hour(time, **sample_fields):
    return HourlyForecast(
        time=time,
        sample=make_sample(**sample_fields),
        feels_like_c=20.0,
        condition="Clouds",
        icon="03d",
    )


def make_day(day, **sample_fields):
    return DailyForecast(
        date="2026-01-01",
        day=day,
        temp_max_c=25,
        temp_min_c=20,
        sample=make_sample(**sample_fields),
        condition="Clouds",
        description="scattered clouds",
        icon="03d",
    )


def current_payload():
    return {
        "weather": [{"main": "Rain", "description": "light rain", "icon": "10d"}],
        "main": {"temp": 29.6, "feels_like": 33.2, "humidity": 78, "pressure": 1008},
        "visibility": 8000,
        "wind": {"speed": 5.0, "deg": 220},
    }


def forecast_payload():
    """
    Ten 3-hour steps starting 05:30 local on Thursday 2026-01-01.

    Steps 0-6 fall on Jan 1 (pop 0.1, Clouds), steps 7-9 on Jan 2 (pop 0.8, Rain).
    """
    items = []
    for i in range(10):
        first_day = i < 7
        items.append({
            "dt": BASE_EPOCH + i * 3 * 3600,
            "main": {"temp": 25 + i, "feels_like": 26 + i, "humidity": 70},
            "wind": {"speed": 2.5, "deg": 90},
            "visibility": 10000,
            "pop": 0.1 if first_day else 0.8,
            "weather": [{
                "main": "Clouds" if first_day else "Rain",
                "description": "scattered clouds" if first_day else "moderate rain",
                "icon": "03d" if first_day else "10d",
            }],
        })
    return {"list": items, "city": {"name": "Colombo", "timezone": SRI_LANKA_OFFSET}}
