"""Free backend: Nominatim for geocoding, OSRM for routing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from commute_planner.datasources.base import TravelBackend
from commute_planner.datasources.osrm import client
from commute_planner.exceptions import AddressNotFound, RouteUnavailable, TransportFailure
from commute_planner.schemas import Coordinate

if TYPE_CHECKING:
    import requests


class OsrmBackend(TravelBackend):
    """
    OSRM adapter.

    Coordinates go over the wire as ``lon,lat;lon,lat``. Nominatim returns
    latitude/longitude as strings, which are parsed here.
    """

    name = "osrm"
    profiles = client.PROFILES

    def __init__(
        self,
        osrm_url: str = client.OSRM_API,
        nominatim_url: str = client.NOMINATIM_API,
        *,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(session)
        self.osrm_url = osrm_url.rstrip("/")
        self.nominatim_url = nominatim_url.rstrip("/")

    def geocode(self, address: str, country_scope: str) -> Coordinate:
        url = f"{self.nominatim_url}/search"
        params = {
            "q": address,
            "format": "jsonv2",
            "countrycodes": country_scope.lower(),
            "limit": 1,
        }
        resp, data = self._get(url, params)
        if not resp.ok:
            raise TransportFailure(url, f"HTTP {resp.status_code}")
        if not isinstance(data, list):
            raise TransportFailure(url, "expected a list of places")
        if not data:
            raise AddressNotFound(address, country_scope)
        return _parse_place(url, data[0])

    def directions(
        self, origin: Coordinate, destination: Coordinate, profile: str
    ) -> tuple[float, float]:
        coordinates = f"{origin.as_lonlat()};{destination.as_lonlat()}"
        url = f"{self.osrm_url}/route/v1/{profile}/{coordinates}"
        resp, data = self._get(url, dict(client.ROUTE_PARAMS))

        # OSRM answers NoRoute/NoSegment with a 400 and a JSON body
        code = data.get("code") if isinstance(data, dict) else None
        if not resp.ok:
            raise RouteUnavailable(profile, f"HTTP {resp.status_code} ({code or 'no code'})")
        if code != "Ok":
            message = data.get("message", "unknown error") if isinstance(data, dict) else "malformed"
            raise RouteUnavailable(profile, f"{code}: {message}")

        routes = data.get("routes")
        if not isinstance(routes, list):
            raise TransportFailure(url, "expected a list of routes")
        if not routes:
            raise RouteUnavailable(profile, "no routes returned")
        return _parse_route(url, routes[0])


def _parse_place(url: str, place: Any) -> Coordinate:
    try:
        return Coordinate(lon=float(place["lon"]), lat=float(place["lat"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise TransportFailure(url, f"malformed place: {exc}") from exc


def _parse_route(url: str, route: Any) -> tuple[float, float]:
    try:
        return float(route["duration"]), float(route["distance"])
    except (KeyError, TypeError, ValueError) as exc:
        raise TransportFailure(url, f"malformed route: {exc}") from exc
