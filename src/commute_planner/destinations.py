"""Editing helpers for the user's destination list.

Destinations are immutable; every helper returns a new list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from commute_planner.schemas import Destination, TransportMode

if TYPE_CHECKING:
    from collections.abc import Sequence

FIELD_SEPARATOR = "|"


def add_destination(
    destinations: Sequence[Destination],
    name: str,
    address: str,
    mode: TransportMode | str = TransportMode.DRIVING,
) -> list[Destination]:
    """Append a new destination. Blank name or address raises ValueError."""
    if not name.strip() or not address.strip():
        raise ValueError("A destination needs both a name and an address")
    return [*destinations, Destination(name=name, address=address, mode=mode)]


def remove_destination(
    destinations: Sequence[Destination], destination_id: str
) -> list[Destination]:
    """Drop the destination with ``destination_id`` (no-op if absent)."""
    return [d for d in destinations if d.id != destination_id]


def parse_destination(text: str) -> Destination:
    """
    Parse ``NAME|ADDRESS[|MODE]`` as used on the command line.

    >>> parse_destination("Work|King's Cross, London|transit").mode
    <TransportMode.TRANSIT: 'transit'>
    """
    parts = [p.strip() for p in text.split(FIELD_SEPARATOR)]
    if len(parts) not in (2, 3):
        raise ValueError(f"Expected NAME|ADDRESS[|MODE], got {text!r}")
    name, address = parts[0], parts[1]
    if not name or not address:
        raise ValueError(f"Destination name and address must not be empty: {text!r}")
    mode = TransportMode(parts[2]) if len(parts) == 3 and parts[2] else TransportMode.DRIVING
    return Destination(name=name, address=address, mode=mode)
