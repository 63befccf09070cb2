"""Sample London rental listings used when no listing file is given."""

from __future__ import annotations

from commute_planner.schemas import Coordinate, Property

# Central London, for map defaults
LONDON_CENTER = Coordinate(lon=-0.1278, lat=51.5074)

SAMPLE_PROPERTIES: tuple[Property, ...] = (
    Property(
        id="1",
        title="Cozy Room in Shared House - Camden",
        location="Camden, London",
        coordinate=Coordinate(lon=-0.1426, lat=51.5392),
        price=650,
        price_type="month",
        property_type="room",
        bedrooms=1,
        bathrooms=1,
    ),
    Property(
        id="2",
        title="Modern Studio Apartment",
        location="King's Cross, London",
        coordinate=Coordinate(lon=-0.124, lat=51.5301),
        price=1200,
        price_type="month",
        property_type="studio",
        bathrooms=1,
    ),
    Property(
        id="3",
        title="Spacious 2-Bed Flat",
        location="Islington, London",
        coordinate=Coordinate(lon=-0.1022, lat=51.5416),
        price=2000,
        price_type="month",
        property_type="flat",
        bedrooms=2,
        bathrooms=1,
        available=False,
    ),
)
