"""
Sri Lanka transport hubs - weather lookup locations
Provides coordinates, district and province for each supported city
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class WeatherLocation:
    name: str
    lat: float
    lon: float
    district: str
    province: str

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "district": self.district,
            "province": self.province,
        }


# Major cities and transportation hubs
SRI_LANKA_LOCATIONS: List[WeatherLocation] = [
    WeatherLocation("Colombo", 6.9271, 79.8612, "Colombo", "Western"),
    WeatherLocation("Kandy", 7.2906, 80.6337, "Kandy", "Central"),
    WeatherLocation("Galle", 6.0535, 80.2210, "Galle", "Southern"),
    WeatherLocation("Jaffna", 9.6615, 80.0255, "Jaffna", "Northern"),
    WeatherLocation("Anuradhapura", 8.3114, 80.4037, "Anuradhapura", "North Central"),
    WeatherLocation("Batticaloa", 7.7102, 81.6924, "Batticaloa", "Eastern"),
    WeatherLocation("Matara", 5.9549, 80.5550, "Matara", "Southern"),
    WeatherLocation("Negombo", 7.2083, 79.8358, "Gampaha", "Western"),
    WeatherLocation("Trincomalee", 8.5874, 81.2152, "Trincomalee", "Eastern"),
    WeatherLocation("Badulla", 6.9895, 81.0567, "Badulla", "Uva"),
    WeatherLocation("Ratnapura", 6.6828, 80.4008, "Ratnapura", "Sabaragamuwa"),
    WeatherLocation("Kurunegala", 7.4863, 80.3647, "Kurunegala", "North Western"),
]

_LOCATIONS_BY_NAME: Dict[str, WeatherLocation] = {
    loc.name.lower(): loc for loc in SRI_LANKA_LOCATIONS
}


def get_location(name: str) -> Optional[WeatherLocation]:
    """Case-insensitive lookup, None when the city is not supported."""
    if not name:
        return None
    return _LOCATIONS_BY_NAME.get(name.strip().lower())


def get_all_locations() -> List[WeatherLocation]:
    return list(SRI_LANKA_LOCATIONS)
