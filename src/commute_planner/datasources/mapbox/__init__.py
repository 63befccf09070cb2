"""Mapbox backend (requires an access token).

Public API:
  - backend: MapboxBackend
  - client: API URLs, profile mapping
"""

from commute_planner.datasources.mapbox.backend import MapboxBackend
from commute_planner.datasources.mapbox.client import MAPBOX_API

__all__ = ["MAPBOX_API", "MapboxBackend"]
