"""Mapbox API constants and profile mapping.

API docs:
  - Geocoding v5: https://docs.mapbox.com/api/search/geocoding-v5/
  - Directions v5: https://docs.mapbox.com/api/navigation/directions/

Requires an access token (public ``pk.`` token is enough).
"""

from commute_planner.schemas import TransportMode

MAPBOX_API = "https://api.mapbox.com"
GEOCODING_PATH = "/geocoding/v5/mapbox.places/{query}.json"
DIRECTIONS_PATH = "/directions/v5/{profile}/{coordinates}"

# Mapbox Directions has no transit profile; transit falls back to walking.
PROFILES = {
    TransportMode.DRIVING: "mapbox/driving",
    TransportMode.WALKING: "mapbox/walking",
    TransportMode.CYCLING: "mapbox/cycling",
}

ROUTE_PARAMS = {
    "alternatives": "false",
    "overview": "false",
    "steps": "false",
}
