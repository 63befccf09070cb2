"""Commute Planner - travel times from rental listings to your destinations.

Architecture::

    datasources/   Geocoding + routing backends (OSRM/Nominatim, Mapbox)
    services/      Shared utilities (HTTP client, ordered async fan-out)
    travel.py      TravelTimeService: geocode + route, one origin to many addresses
    formatting.py  Seconds/meters -> "1h 30m" / "1.5km"
    analysis/      Listings x destinations travel matrix
    board.py       Owner of the listing list (progress flag, last-write-wins)
    flows/         Prefect orchestration (compute travel times for a listing set)

Data flow: destinations -> datasources (resolve, route) -> travel -> analysis -> board/flows
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from commute_planner.board import PropertyBoard
from commute_planner.config import Settings
from commute_planner.schemas import Destination, Property, TransportMode
from commute_planner.travel import TravelTimeService

__all__ = [
    "Destination",
    "Property",
    "PropertyBoard",
    "Settings",
    "TransportMode",
    "TravelTimeService",
    "__version__",
]
