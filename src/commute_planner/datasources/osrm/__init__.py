"""Nominatim + OSRM backend (free, no API key).

Public API:
  - backend: OsrmBackend
  - client: API URLs, profile mapping
"""

from commute_planner.datasources.osrm.backend import OsrmBackend
from commute_planner.datasources.osrm.client import NOMINATIM_API, OSRM_API

__all__ = ["NOMINATIM_API", "OSRM_API", "OsrmBackend"]
