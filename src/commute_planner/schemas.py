"""
Domain models for commute planner.

Pydantic models for listings, destinations and travel results.
These define the canonical schema - backends normalize API responses to these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# =============================================================================
# Geography
# =============================================================================


class Coordinate(BaseModel):
    """A WGS84 point in (longitude, latitude) order."""

    model_config = ConfigDict(frozen=True)

    lon: float = Field(..., ge=-180, le=180)
    lat: float = Field(..., ge=-90, le=90)

    def as_lonlat(self) -> str:
        """Return ``"lon,lat"`` as used in routing URLs."""
        return f"{self.lon},{self.lat}"


# =============================================================================
# Transport modes
# =============================================================================


class TransportMode(StrEnum):
    """How the user travels to a destination."""

    DRIVING = "driving"
    WALKING = "walking"
    CYCLING = "cycling"
    TRANSIT = "transit"

    @classmethod
    def _missing_(cls, value: object) -> TransportMode | None:
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = _MODE_ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return None

    @property
    def label(self) -> str:
        """Display label, e.g. ``Public Transport``."""
        return _MODE_LABELS[self]


_MODE_ALIASES = {
    "bicycling": "cycling",
    "bike": "cycling",
    "foot": "walking",
    "walk": "walking",
    "car": "driving",
    "drive": "driving",
    "public_transport": "transit",
}

_MODE_LABELS = {
    TransportMode.DRIVING: "Driving",
    TransportMode.WALKING: "Walking",
    TransportMode.CYCLING: "Cycling",
    TransportMode.TRANSIT: "Public Transport",
}


# =============================================================================
# Destinations
# =============================================================================


class TravelQuery(BaseModel):
    """
    An address to travel to, and how.

    ``mode`` must be a known mode or alias; anything else fails validation
    here, so stored destinations never carry an unknown mode. Callers with
    a free-form mode string use ``TravelTimeService.calculate_one``, where
    the backend routes unknown modes with its walking profile.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    address: str = Field(..., min_length=1)
    mode: TransportMode = TransportMode.DRIVING

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, TransportMode):
            return TransportMode(value)
        return value


class Destination(TravelQuery):
    """A named personal destination ("Work", "Gym") owned by the caller."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(..., min_length=1)


# =============================================================================
# Travel results
# =============================================================================


class TravelMetric(BaseModel):
    """Duration and distance of the best route for one origin/destination pair."""

    model_config = ConfigDict(frozen=True)

    duration_seconds: float = Field(..., ge=0)
    distance_meters: float = Field(..., ge=0)
    mode: TransportMode | str = Field(
        ..., union_mode="left_to_right", description="Mode the caller asked for"
    )
    routed_mode: TransportMode = Field(..., description="Mode the backend actually routed")
    profile: str = Field(..., description="Backend profile identifier")

    @property
    def fallback(self) -> bool:
        """True when the backend had no profile for the requested mode."""
        return self.routed_mode != self.mode


# Positional: result[i] belongs to destinations[i]; None means "could not compute".
TravelResult = list[TravelMetric | None]


class TravelTimeEntry(BaseModel):
    """One formatted travel time shown on a listing."""

    destination_name: str
    duration: str
    distance: str
    mode: TransportMode
    routed_mode: TransportMode | None = None

    @property
    def is_available(self) -> bool:
        """False for "N/A" placeholder entries."""
        return self.routed_mode is not None


# =============================================================================
# Listings
# =============================================================================


class Property(BaseModel):
    """A rental listing, optionally augmented with travel times."""

    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    coordinate: Coordinate
    location: str | None = None
    price: float | None = None
    price_type: Literal["week", "month"] | None = None
    property_type: Literal["room", "flat", "house", "studio"] | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    available: bool = True
    travel_times: list[TravelTimeEntry] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coordinate_from_lat_lon(cls, data: Any) -> Any:
        """Accept flat ``latitude``/``longitude`` keys as listing feeds send them."""
        if isinstance(data, dict) and "coordinate" not in data:
            if "latitude" in data and "longitude" in data:
                data = dict(data)
                data["coordinate"] = {"lon": data.pop("longitude"), "lat": data.pop("latitude")}
        return data


# =============================================================================
# Notifications
# =============================================================================


class Notification(BaseModel):
    """User-facing message emitted once per completed batch."""

    title: str
    description: str
    is_error: bool = False
