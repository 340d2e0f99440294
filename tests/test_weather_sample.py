import dataclasses

import pytest

from transit_weather.config import get_settings
from transit_weather.core.locations import get_all_locations, get_location
from transit_weather.core.weather_sample import WeatherSample


def test_from_dict_accepts_client_payload_keys():
    sample = WeatherSample.from_dict({
        "temperature": 31,
        "humidity": 82,
        "windSpeed": 14,
        "precipitationChance": 65,
        "visibility": 6,
    })
    assert sample == WeatherSample(
        temperature_c=31.0,
        humidity_pct=82.0,
        wind_speed_kmh=14.0,
        precipitation_chance_pct=65.0,
        visibility_km=6.0,
    )


def test_from_dict_prefers_snake_case_and_defaults_missing_fields():
    sample = WeatherSample.from_dict({"temperature_c": -4, "temperature": 99, "visibilityKm": 3})

    assert sample.temperature_c == -4
    assert sample.visibility_km == 3
    assert sample.humidity_pct == 0
    assert sample.wind_speed_kmh == 0
    assert sample.precipitation_chance_pct == 0


def test_to_dict_uses_snake_case_keys():
    data = WeatherSample(temperature_c=20, visibility_km=9).to_dict()
    assert list(data) == [
        "temperature_c",
        "humidity_pct",
        "wind_speed_kmh",
        "precipitation_chance_pct",
        "visibility_km",
    ]
    assert WeatherSample.from_dict(data) == WeatherSample(temperature_c=20, visibility_km=9)


def test_sample_is_immutable():
    sample = WeatherSample()
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample.temperature_c = 10


def test_location_lookup_is_case_insensitive():
    assert get_location("  kandy ").name == "Kandy"
    assert get_location("Negombo").district == "Gampaha"
    assert get_location("Atlantis") is None
    assert get_location("") is None
    assert len(get_all_locations()) == 12


def test_settings_defaults():
    settings = get_settings()
    assert settings.api_key is None
    assert settings.base_url == "https://api.openweathermap.org/data/2.5"
    assert settings.api_timeout == 5
    assert settings.cache_duration == 600
    assert settings.hourly_limit == 24
    assert settings.daily_limit == 7


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc")
    monkeypatch.setenv("OPENWEATHER_BASE_URL", "http://localhost:8080/weather/")
    monkeypatch.setenv("WEATHER_API_TIMEOUT", "2.5")
    monkeypatch.setenv("WEATHER_DAILY_LIMIT", "not-a-number")

    settings = get_settings()
    assert settings.api_key == "abc"
    assert settings.base_url == "http://localhost:8080/weather"
    assert settings.api_timeout == 2.5
    assert settings.daily_limit == 7


@pytest.mark.parametrize("raw", ["0", "-1"])
def test_non_positive_limits_fall_back_to_defaults(monkeypatch, raw):
    monkeypatch.setenv("WEATHER_HOURLY_LIMIT", raw)
    monkeypatch.setenv("WEATHER_DAILY_LIMIT", raw)

    settings = get_settings()
    assert settings.hourly_limit == 24
    assert settings.daily_limit == 7
