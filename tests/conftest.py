"""Shared fixtures: an in-memory backend and canned HTTP responses."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest

from commute_planner.datasources.base import TravelBackend
from commute_planner.exceptions import AddressNotFound, RouteUnavailable
from commute_planner.schemas import Coordinate, Destination, Property, TransportMode
from commute_planner.travel import TravelTimeService

CAMDEN = Coordinate(lon=-0.1426, lat=51.5392)
ISLINGTON = Coordinate(lon=-0.1022, lat=51.5416)
KINGS_CROSS = Coordinate(lon=-0.124, lat=51.5301)
SHOREDITCH = Coordinate(lon=-0.0777, lat=51.5265)


class FakeBackend(TravelBackend):
    """
    Backend answering from dictionaries.

    ``places`` maps address -> Coordinate; ``routes`` maps destination
    Coordinate -> (seconds, meters). ``delays`` (seconds) and ``errors``
    (exception to raise) are keyed by address and applied during geocoding.
    """

    name = "fake"
    profiles = {
        TransportMode.DRIVING: "car",
        TransportMode.WALKING: "foot",
        TransportMode.CYCLING: "bike",
    }

    def __init__(
        self,
        places: dict[str, Coordinate] | None = None,
        routes: dict[Coordinate, tuple[float, float]] | None = None,
        *,
        delays: dict[str, float] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        super().__init__(session=Mock())
        self.places = places or {}
        self.routes = routes or {}
        self.delays = delays or {}
        self.errors = errors or {}
        self.geocode_calls: list[tuple[str, str]] = []
        self.route_calls: list[tuple[Coordinate, Coordinate, str]] = []

    def geocode(self, address: str, country_scope: str) -> Coordinate:
        self.geocode_calls.append((address, country_scope))
        if address in self.delays:
            time.sleep(self.delays[address])
        if address in self.errors:
            raise self.errors[address]
        if address not in self.places:
            raise AddressNotFound(address, country_scope)
        return self.places[address]

    def directions(
        self, origin: Coordinate, destination: Coordinate, profile: str
    ) -> tuple[float, float]:
        self.route_calls.append((origin, destination, profile))
        if destination not in self.routes:
            raise RouteUnavailable(profile, "no route in fake")
        return self.routes[destination]


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Backend knowing King's Cross and Shoreditch, each with one route."""
    return FakeBackend(
        places={
            "King's Cross, London": KINGS_CROSS,
            "Shoreditch, London": SHOREDITCH,
        },
        routes={
            KINGS_CROSS: (540.0, 2400.0),
            SHOREDITCH: (5400.0, 12000.0),
        },
    )


@pytest.fixture
def service(fake_backend: FakeBackend) -> TravelTimeService:
    return TravelTimeService(fake_backend)


@pytest.fixture
def destinations() -> list[Destination]:
    return [
        Destination(id="work", name="Work", address="King's Cross, London", mode="driving"),
        Destination(id="gym", name="Gym", address="Shoreditch, London", mode="cycling"),
    ]


@pytest.fixture
def properties() -> list[Property]:
    return [
        Property(id="1", title="Room in Camden", coordinate=CAMDEN),
        Property(id="3", title="Flat in Islington", coordinate=ISLINGTON),
    ]


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Build a fake ``requests.Response`` with a JSON payload."""

    def _make(payload: Any, status: int = 200) -> Mock:
        resp = Mock()
        resp.status_code = status
        resp.ok = status < 400
        if isinstance(payload, Exception):
            resp.json.side_effect = payload
        else:
            resp.json.return_value = payload
        return resp

    return _make
