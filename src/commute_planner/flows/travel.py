"""
Prefect flow for computing travel times for a listing set.

Run locally (sample London listings, one destination):
    python -m commute_planner.flows.travel

Run with Prefect dashboard:
    prefect server start &
    python -m commute_planner.flows.travel
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from prefect import flow
from pydantic import TypeAdapter

from commute_planner.analysis.travel_matrix import build_notification, recompute
from commute_planner.config import get_settings
from commute_planner.datasources import create_backend
from commute_planner.reference import SAMPLE_PROPERTIES
from commute_planner.schemas import Destination, Property
from commute_planner.travel import TravelTimeService

_properties_adapter = TypeAdapter(list[Property])
_destinations_adapter = TypeAdapter(list[Destination])


def load_properties(path: Path) -> list[Property]:
    """Read listings from a JSON array file."""
    return _properties_adapter.validate_json(path.read_bytes())


def load_destinations(path: Path) -> list[Destination]:
    """Read destinations from a JSON array file."""
    return _destinations_adapter.validate_json(path.read_bytes())


@flow(name="compute-travel-times", log_prints=True)
async def compute_travel_times(
    destinations: list[dict[str, Any]],
    properties: list[dict[str, Any]] | None = None,
    backend: str | None = None,
) -> dict[str, Any]:
    """
    Compute travel times from every listing to every destination.

    Args:
        destinations: Destination records ``{name, address, mode}``.
        properties: Listing records; defaults to the sample London listings.
        backend: Backend name overriding ``Settings.backend``.

    Returns:
        Dict with ``batch_id``, ``failed_ids``, ``notification`` (None when
        there were no destinations) and the augmented ``properties``.
    """
    settings = get_settings()
    if backend is not None:
        settings = settings.model_copy(update={"backend": backend})

    service = TravelTimeService(
        create_backend(settings),
        country_scope=settings.country_scope,
        max_concurrency=settings.max_concurrency,
    )
    props = (
        _properties_adapter.validate_python(properties)
        if properties is not None
        else list(SAMPLE_PROPERTIES)
    )
    dests = _destinations_adapter.validate_python(destinations)

    print(
        f"Computing travel times for {len(props)} properties x "
        f"{len(dests)} destinations via {settings.backend}..."
    )
    result = await recompute(service, props, dests)

    notification = build_notification(result, dests) if dests else None
    if notification is not None:
        print(f"{notification.title}: {notification.description}")

    return {
        "batch_id": result.batch_id,
        "failed_ids": result.failed_ids,
        "notification": notification.model_dump() if notification else None,
        "properties": [p.model_dump(mode="json") for p in result.properties],
    }


if __name__ == "__main__":
    outcome = asyncio.run(
        compute_travel_times(
            destinations=[
                {"name": "Work", "address": "King's Cross, London", "mode": "driving"},
            ]
        )
    )
    print(f"Flow complete: {outcome['notification']}")
