"""
WEATHER OBSERVATION RECORDS

Purpose:
- Provider-independent records for current, hourly and daily weather
- Each record carries the WeatherSample the risk engine scores
- Presentation metadata (condition, icon, labels) travels alongside

Rules:
- No IO operations
- Units: Celsius, km/h, km, percent
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from transit_weather.core.weather_sample import WeatherSample


@dataclass(frozen=True)
class CurrentConditions:
    """
    Current-conditions snapshot for one location.

    Attributes:
        location: Location display name
        sample: Scoring input (precipitation chance is 0 for a snapshot)
        feels_like_c: Apparent temperature
        pressure_hpa: Sea-level pressure
        wind_direction_deg: Meteorological wind direction
        condition: Main condition group (Rain, Clouds, Mist, ...)
        description: Detailed description
        icon: Provider icon code
        timestamp: When the snapshot was parsed (UTC)
        measured: Same reading before display rounding, if available
    """
    location: str
    sample: WeatherSample
    feels_like_c: float
    pressure_hpa: float
    wind_direction_deg: float
    condition: str
    description: str
    icon: str
    timestamp: datetime
    measured: Optional[WeatherSample] = None

    @property
    def impact_sample(self) -> WeatherSample:
        """Unrounded reading for threshold checks, else the display sample."""
        return self.measured if self.measured is not None else self.sample

    @property
    def temperature_c(self) -> float:
        return self.sample.temperature_c

    @property
    def wind_speed_kmh(self) -> float:
        return self.sample.wind_speed_kmh

    @property
    def visibility_km(self) -> float:
        return self.sample.visibility_km

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location,
            **self.sample.to_dict(),
            "feels_like_c": self.feels_like_c,
            "pressure_hpa": self.pressure_hpa,
            "wind_direction_deg": self.wind_direction_deg,
            "condition": self.condition,
            "description": self.description,
            "icon": self.icon,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class HourlyForecast:
    time: str
    sample: WeatherSample
    feels_like_c: float
    condition: str
    icon: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            **self.sample.to_dict(),
            "feels_like_c": self.feels_like_c,
            "condition": self.condition,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class DailyForecast:
    """
    One calendar day aggregated from the provider's 3-hour forecast.

    sample.temperature_c is the rounded mean of temp_max_c and temp_min_c.
    """
    date: str
    day: str
    temp_max_c: float
    temp_min_c: float
    sample: WeatherSample
    condition: str
    description: str
    icon: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "day": self.day,
            "temp_max_c": self.temp_max_c,
            "temp_min_c": self.temp_min_c,
            **self.sample.to_dict(),
            "condition": self.condition,
            "description": self.description,
            "icon": self.icon,
        }
