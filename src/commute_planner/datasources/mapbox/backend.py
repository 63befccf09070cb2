"""Commercial backend: Mapbox Geocoding + Directions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from commute_planner.datasources.base import TravelBackend
from commute_planner.datasources.mapbox import client
from commute_planner.exceptions import (
    AddressNotFound,
    ConfigurationError,
    RouteUnavailable,
    TransportFailure,
)
from commute_planner.schemas import Coordinate

if TYPE_CHECKING:
    import requests


class MapboxBackend(TravelBackend):
    """Mapbox adapter. The access token is passed in, never read from the environment."""

    name = "mapbox"
    profiles = client.PROFILES

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = client.MAPBOX_API,
        session: requests.Session | None = None,
    ) -> None:
        if not access_token or not access_token.strip():
            raise ConfigurationError("A Mapbox access token is required")
        super().__init__(session)
        self._access_token = access_token.strip()
        self.base_url = base_url.rstrip("/")

    def __repr__(self) -> str:
        return f"MapboxBackend(base_url={self.base_url!r})"

    def geocode(self, address: str, country_scope: str) -> Coordinate:
        url = self.base_url + client.GEOCODING_PATH.format(query=quote(address, safe=""))
        params = {
            "access_token": self._access_token,
            "country": country_scope.lower(),
            "limit": 1,
        }
        resp, data = self._get(url, params)
        if not resp.ok:
            raise TransportFailure(url, f"HTTP {resp.status_code}")
        features = data.get("features") if isinstance(data, dict) else None
        if not isinstance(features, list):
            raise TransportFailure(url, "expected a list of features")
        if not features:
            raise AddressNotFound(address, country_scope)
        return _parse_feature(url, features[0])

    def directions(
        self, origin: Coordinate, destination: Coordinate, profile: str
    ) -> tuple[float, float]:
        coordinates = f"{origin.as_lonlat()};{destination.as_lonlat()}"
        url = self.base_url + client.DIRECTIONS_PATH.format(
            profile=profile, coordinates=coordinates
        )
        params = {"access_token": self._access_token, **client.ROUTE_PARAMS}
        resp, data = self._get(url, params)

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
        try:
            route = routes[0]
            return float(route["duration"]), float(route["distance"])
        except (KeyError, TypeError, ValueError) as exc:
            raise TransportFailure(url, f"malformed route: {exc}") from exc


def _parse_feature(url: str, feature: Any) -> Coordinate:
    """Mapbox features carry ``center`` as ``[lon, lat]``."""
    try:
        lon, lat = feature["center"]
        return Coordinate(lon=float(lon), lat=float(lat))
    except (KeyError, TypeError, ValueError) as exc:
        raise TransportFailure(url, f"malformed feature: {exc}") from exc
