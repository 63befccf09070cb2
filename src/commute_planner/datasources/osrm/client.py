"""OSRM + Nominatim API constants and profile mapping.

API docs:
  - OSRM route service: https://project-osrm.org/docs/v5.24.0/api/#route-service
  - Nominatim search: https://nominatim.org/release-docs/latest/api/Search/

Both public instances are free and need no key. Nominatim's usage policy
requires an identifying User-Agent (set by ``services.http``).
"""

from commute_planner.schemas import TransportMode

OSRM_API = "https://router.project-osrm.org"
NOMINATIM_API = "https://nominatim.openstreetmap.org"

# OSRM has no public-transport profile; transit falls back to foot.
PROFILES = {
    TransportMode.DRIVING: "driving",
    TransportMode.WALKING: "foot",
    TransportMode.CYCLING: "cycling",
}

# Only the total duration/distance is needed.
ROUTE_PARAMS = {
    "overview": "false",
    "alternatives": "false",
    "steps": "false",
}
