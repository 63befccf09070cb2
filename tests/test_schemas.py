"""Tests for domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from commute_planner.schemas import (
    Coordinate,
    Destination,
    Property,
    TransportMode,
    TravelMetric,
    TravelQuery,
    TravelTimeEntry,
)


class TestCoordinate:
    """Coordinate bounds and formatting."""

    def test_as_lonlat(self) -> None:
        assert Coordinate(lon=-0.1426, lat=51.5392).as_lonlat() == "-0.1426,51.5392"

    @pytest.mark.parametrize(("lon", "lat"), [(-181, 0), (181, 0), (0, -91), (0, 91)])
    def test_out_of_range_rejected(self, lon: float, lat: float) -> None:
        with pytest.raises(ValidationError):
            Coordinate(lon=lon, lat=lat)

    def test_frozen(self) -> None:
        coord = Coordinate(lon=0, lat=0)
        with pytest.raises(ValidationError):
            coord.lat = 10  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Coordinate(lon=1, lat=2), Coordinate(lon=1, lat=2)}) == 1


class TestTransportMode:
    """Mode parsing and labels."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("driving", TransportMode.DRIVING),
            ("Walking", TransportMode.WALKING),
            ("bicycling", TransportMode.CYCLING),
            ("bike", TransportMode.CYCLING),
            ("foot", TransportMode.WALKING),
            (" transit ", TransportMode.TRANSIT),
            ("public_transport", TransportMode.TRANSIT),
        ],
    )
    def test_aliases(self, raw: str, expected: TransportMode) -> None:
        assert TransportMode(raw) is expected

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            TransportMode("hovercraft")

    def test_labels(self) -> None:
        assert TransportMode.TRANSIT.label == "Public Transport"
        assert TransportMode.CYCLING.label == "Cycling"


class TestDestination:
    """Destination validation."""

    def test_strips_address(self) -> None:
        dest = Destination(name="Work", address="  King's Cross, London  ")
        assert dest.address == "King's Cross, London"

    def test_generates_id(self) -> None:
        a = Destination(name="Work", address="King's Cross")
        b = Destination(name="Work", address="King's Cross")
        assert a.id and a.id != b.id

    def test_mode_alias(self) -> None:
        dest = Destination(name="Gym", address="Shoreditch", mode="bicycling")
        assert dest.mode is TransportMode.CYCLING

    def test_default_mode_is_driving(self) -> None:
        assert TravelQuery(address="Camden").mode is TransportMode.DRIVING

    def test_empty_address_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Destination(name="Work", address="   ")

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Destination(name="Work", address="Camden", mode="teleport")


class TestTravelMetric:
    """Fallback flag and bounds."""

    def test_no_fallback(self) -> None:
        metric = TravelMetric(
            duration_seconds=60,
            distance_meters=100,
            mode=TransportMode.DRIVING,
            routed_mode=TransportMode.DRIVING,
            profile="driving",
        )
        assert metric.fallback is False

    def test_fallback_for_transit(self) -> None:
        metric = TravelMetric(
            duration_seconds=60,
            distance_meters=100,
            mode=TransportMode.TRANSIT,
            routed_mode=TransportMode.WALKING,
            profile="foot",
        )
        assert metric.fallback is True

    def test_unknown_requested_mode_kept(self) -> None:
        metric = TravelMetric(
            duration_seconds=60,
            distance_meters=100,
            mode="ferry",
            routed_mode=TransportMode.WALKING,
            profile="foot",
        )
        assert metric.mode == "ferry"
        assert metric.fallback is True

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TravelMetric(
                duration_seconds=-1,
                distance_meters=0,
                mode=TransportMode.DRIVING,
                routed_mode=TransportMode.DRIVING,
                profile="driving",
            )


class TestProperty:
    """Listing parsing."""

    def test_flat_latitude_longitude(self) -> None:
        prop = Property.model_validate(
            {"id": "1", "title": "Room", "latitude": 51.5392, "longitude": -0.1426}
        )
        assert prop.coordinate == Coordinate(lon=-0.1426, lat=51.5392)

    def test_extra_fields_kept(self) -> None:
        prop = Property.model_validate(
            {"id": "1", "title": "Room", "coordinate": {"lon": 0, "lat": 0}, "image": "x.jpg"}
        )
        assert prop.model_dump()["image"] == "x.jpg"

    def test_travel_times_default_empty(self) -> None:
        prop = Property(id="1", title="Room", coordinate=Coordinate(lon=0, lat=0))
        assert prop.travel_times == []


class TestTravelTimeEntry:
    """Placeholder detection."""

    def test_placeholder_not_available(self) -> None:
        entry = TravelTimeEntry(
            destination_name="Work", duration="N/A", distance="N/A", mode=TransportMode.DRIVING
        )
        assert entry.is_available is False

    def test_computed_entry_available(self) -> None:
        entry = TravelTimeEntry(
            destination_name="Work",
            duration="9 min",
            distance="2.4km",
            mode=TransportMode.DRIVING,
            routed_mode=TransportMode.DRIVING,
        )
        assert entry.is_available is True
