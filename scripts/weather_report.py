import json
import logging
import sys

from transit_weather.core.locations import get_all_locations
from transit_weather.integrations.openweather import get_weather_report, risk_overview

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

locations = sys.argv[1:] or [loc.name for loc in get_all_locations()]

print("🌦️  Building transportation weather reports...")

for name in locations:
    report = get_weather_report(name)
    if report is None:
        print(f"⚠️  {name}: weather unavailable")
        continue

    overview = risk_overview(report)
    print(json.dumps(overview, indent=2, default=str))

print("✅ Done")
