"""Capability contract shared by every geocoding/routing backend."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

import requests
from pydantic import ValidationError

from commute_planner.exceptions import AddressNotFound, RouteUnavailable, TransportFailure
from commute_planner.schemas import Coordinate, TransportMode, TravelMetric
from commute_planner.services import http

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class TravelBackend(ABC):
    """
    One address-resolution + routing provider.

    Subclasses implement the strict ``geocode`` and ``directions`` methods,
    which raise ``AddressNotFound``, ``RouteUnavailable`` or
    ``TransportFailure``. The public ``resolve`` and ``route`` methods fold
    every failure into ``None`` and never raise.
    """

    #: Short name used in logs and settings.
    name: ClassVar[str]
    #: Backend profile identifier per supported mode.
    profiles: ClassVar[Mapping[TransportMode, str]]
    #: Mode routed when the requested one has no profile.
    default_mode: ClassVar[TransportMode] = TransportMode.WALKING

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or http.session

    # ── Public API ────────────────────────────────────────────────

    def resolve(self, address: str, country_scope: str) -> Coordinate | None:
        """Resolve a free-text address to a coordinate, or None if not found."""
        query = address.strip()
        if not query:
            logger.debug("[%s] empty address, skipping geocode", self.name)
            return None
        try:
            return self.geocode(query, country_scope)
        except AddressNotFound as exc:
            logger.info("[%s] %s", self.name, exc)
        except TransportFailure as exc:
            logger.warning("[%s] geocoding failed: %s", self.name, exc)
        return None

    def route(
        self, origin: Coordinate, destination: Coordinate, mode: TransportMode | str
    ) -> TravelMetric | None:
        """Duration and distance of the fastest route, or None if unroutable."""
        requested = _coerce_mode(mode)
        routed_mode = self.routed_mode(requested)
        profile = self.profiles[routed_mode]
        if routed_mode != requested:
            logger.debug(
                "[%s] no profile for mode %r, routing as %s", self.name, requested, profile
            )
        try:
            duration, distance = self.directions(origin, destination, profile)
        except RouteUnavailable as exc:
            logger.info("[%s] %s", self.name, exc)
            return None
        except TransportFailure as exc:
            logger.warning("[%s] routing failed: %s", self.name, exc)
            return None
        try:
            return TravelMetric(
                duration_seconds=duration,
                distance_meters=distance,
                mode=requested,
                routed_mode=routed_mode,
                profile=profile,
            )
        except ValidationError as exc:
            # Negative or NaN duration/distance from the router
            logger.warning(
                "[%s] unusable route (%s s, %s m): %s",
                self.name,
                duration,
                distance,
                exc.errors()[0]["msg"],
            )
            return None

    def routed_mode(self, mode: TransportMode | str) -> TransportMode:
        """The mode actually routed for ``mode``, after the default-profile fallback."""
        if isinstance(mode, TransportMode) and mode in self.profiles:
            return mode
        return self.default_mode

    # ── Backend-specific ──────────────────────────────────────────

    @abstractmethod
    def geocode(self, address: str, country_scope: str) -> Coordinate:
        """Best match for ``address``. Raises AddressNotFound or TransportFailure."""

    @abstractmethod
    def directions(
        self, origin: Coordinate, destination: Coordinate, profile: str
    ) -> tuple[float, float]:
        """(duration seconds, distance meters). Raises RouteUnavailable or TransportFailure."""

    # ── Private helpers ───────────────────────────────────────────

    def _get(self, url: str, params: dict[str, Any]) -> tuple[requests.Response, Any]:
        """
        GET ``url`` and decode the JSON body.

        Returns (response, payload). Network errors and undecodable bodies
        raise TransportFailure; the HTTP status is left to the caller.
        """
        try:
            resp = self.session.get(url, params=params)
        except requests.RequestException as exc:
            raise TransportFailure(url, str(exc)) from exc
        try:
            payload = resp.json()
        except ValueError as exc:
            raise TransportFailure(url, f"invalid JSON (HTTP {resp.status_code})") from exc
        return resp, payload


def _coerce_mode(mode: TransportMode | str) -> TransportMode | str:
    """Parse known mode names and aliases; leave unknown strings as they are."""
    if isinstance(mode, TransportMode):
        return mode
    try:
        return TransportMode(mode)
    except ValueError:
        return mode
