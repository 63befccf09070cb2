"""Travel-time matrix: every listing × every destination.

``recompute`` fans out one ``calculate_multiple_destinations`` call per
property and merges the formatted results back onto fresh property copies.
A property whose pipeline raises is degraded to placeholder entries; the
other properties are kept.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from commute_planner.formatting import UNAVAILABLE, format_distance, format_duration
from commute_planner.schemas import Notification, Property, TravelTimeEntry
from commute_planner.services.concurrency import gather_ordered

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commute_planner.schemas import Destination, TravelMetric, TravelResult
    from commute_planner.travel import TravelTimeService

logger = logging.getLogger(__name__)

_batch_ids = itertools.count(1)


@dataclass
class BatchResult:
    """Outcome of one ``recompute`` pass."""

    properties: list[Property]
    failed_ids: list[str] = field(default_factory=list)
    batch_id: int = field(default_factory=lambda: next(_batch_ids))

    @property
    def degraded(self) -> bool:
        """True when at least one property could not be computed."""
        return bool(self.failed_ids)


def entry_for(destination: Destination, metric: TravelMetric | None) -> TravelTimeEntry:
    """Format one result; None becomes an "N/A" placeholder entry."""
    if metric is None:
        return TravelTimeEntry(
            destination_name=destination.name,
            duration=UNAVAILABLE,
            distance=UNAVAILABLE,
            mode=destination.mode,
        )
    return TravelTimeEntry(
        destination_name=destination.name,
        duration=format_duration(metric.duration_seconds),
        distance=format_distance(metric.distance_meters),
        mode=destination.mode,
        routed_mode=metric.routed_mode,
    )


def merge_results(
    prop: Property, destinations: Sequence[Destination], results: TravelResult
) -> Property:
    """Copy of ``prop`` whose travel times are replaced by ``results``."""
    if len(results) != len(destinations):
        raise ValueError(
            f"Got {len(results)} results for {len(destinations)} destinations on {prop.id}"
        )
    entries = [entry_for(dest, metric) for dest, metric in zip(destinations, results, strict=True)]
    return prop.model_copy(update={"travel_times": entries})


def clear_travel_times(properties: Sequence[Property]) -> list[Property]:
    """Copies of ``properties`` with no travel times."""
    return [p.model_copy(update={"travel_times": []}) for p in properties]


async def recompute(
    service: TravelTimeService,
    properties: Sequence[Property],
    destinations: Sequence[Destination],
) -> BatchResult:
    """
    Compute travel times from every property to every destination.

    Args:
        service: Travel-time service to query.
        properties: Snapshot of the current listings (not mutated).
        destinations: The user's destinations, in display order.

    Returns:
        BatchResult whose ``properties`` parallel the input, each with exactly
        ``len(destinations)`` travel-time entries (or none when there are no
        destinations).
    """
    if not destinations:
        return BatchResult(properties=clear_travel_times(properties))

    async def _augment(prop: Property) -> Property:
        results = await service.calculate_multiple_destinations(prop.coordinate, destinations)
        return merge_results(prop, destinations, results)

    outcomes = await gather_ordered(_augment, properties)

    augmented: list[Property] = []
    failed: list[str] = []
    for prop, outcome in zip(properties, outcomes, strict=True):
        if isinstance(outcome, BaseException):
            logger.error("Travel times failed for property %s: %r", prop.id, outcome)
            failed.append(prop.id)
            augmented.append(merge_results(prop, destinations, [None] * len(destinations)))
        else:
            augmented.append(outcome)

    result = BatchResult(properties=augmented, failed_ids=failed)
    logger.info(
        "Batch %d: %d properties x %d destinations (%d degraded)",
        result.batch_id,
        len(augmented),
        len(destinations),
        len(failed),
    )
    return result


def build_notification(result: BatchResult, destinations: Sequence[Destination]) -> Notification:
    """User-facing summary of a completed batch."""
    if result.degraded:
        return Notification(
            title="Some Travel Times Failed",
            description=(
                f"Could not calculate travel times for {len(result.failed_ids)} of "
                f"{len(result.properties)} properties"
            ),
            is_error=True,
        )
    return Notification(
        title="Travel Times Updated",
        description=f"Calculated travel times for {len(destinations)} destination(s)",
    )
