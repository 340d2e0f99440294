"""
WEATHER SAMPLE TYPES

Purpose:
- Define the raw weather record consumed by the risk engine
- Define the derived safety and risk factor value types
- Accept both snake_case and the camelCase payload keys of the web client

Rules:
- No business logic
- No IO operations
- No validation (scoring functions are total over real numbers)
"""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Tuple

# ==================================================
# RISK FACTOR NAMES
# ==================================================

WIND_RISK: Literal["WindRisk"] = "WindRisk"
RAIN_RISK: Literal["RainRisk"] = "RainRisk"
VISIBILITY_RISK: Literal["VisibilityRisk"] = "VisibilityRisk"
TEMPERATURE_RISK: Literal["TemperatureRisk"] = "TemperatureRisk"
HUMIDITY_RISK: Literal["HumidityRisk"] = "HumidityRisk"

# Radar axes depend on this order
RISK_FACTOR_NAMES: Tuple[str, ...] = (
    WIND_RISK,
    RAIN_RISK,
    VISIBILITY_RISK,
    TEMPERATURE_RISK,
    HUMIDITY_RISK,
)

# Accepted input keys per field, first match wins
_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "temperature_c": ("temperature_c", "temperatureC", "temperature"),
    "humidity_pct": ("humidity_pct", "humidityPct", "humidity"),
    "wind_speed_kmh": ("wind_speed_kmh", "windSpeedKmh", "windSpeed"),
    "precipitation_chance_pct": (
        "precipitation_chance_pct",
        "precipitationChancePct",
        "precipitationChance",
        "precipitation",
    ),
    "visibility_km": ("visibility_km", "visibilityKm", "visibility"),
}


def _pick(data: Dict[str, Any], keys: Tuple[str, ...]) -> float:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return float(value)
    return 0.0


@dataclass(frozen=True)
class WeatherSample:
    """
    One hour or one day of observed/forecast weather.

    Attributes:
        temperature_c: Ambient temperature in Celsius
        humidity_pct: Relative humidity (0-100 expected)
        wind_speed_kmh: Sustained wind speed in km/h
        precipitation_chance_pct: Probability of precipitation (0-100 expected)
        visibility_km: Horizontal visibility in km
    """
    temperature_c: float = 0.0
    humidity_pct: float = 0.0
    wind_speed_kmh: float = 0.0
    precipitation_chance_pct: float = 0.0
    visibility_km: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {
            "temperature_c": self.temperature_c,
            "humidity_pct": self.humidity_pct,
            "wind_speed_kmh": self.wind_speed_kmh,
            "precipitation_chance_pct": self.precipitation_chance_pct,
            "visibility_km": self.visibility_km,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeatherSample':
        """
        Create from dictionary.

        Missing fields default to 0, matching the fallback behaviour
        of the upstream weather provider.
        """
        return cls(**{
            field: _pick(data, aliases)
            for field, aliases in _FIELD_ALIASES.items()
        })


@dataclass(frozen=True)
class SafetyAssessment:
    """Bounded safety score and its complementary delay risk."""
    safety_score: float
    delay_risk: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "safety_score": self.safety_score,
            "delay_risk": self.delay_risk,
        }


@dataclass(frozen=True)
class RiskFactor:
    """
    A single named risk dimension.

    value is not clamped to [0, 100].
    """
    name: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}
