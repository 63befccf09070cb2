"""
The listing board: owner of the current property list.

Each destination change starts a new travel-time batch. Batches are not
cancelled; a batch that finishes after a newer one was triggered is
discarded (last write wins), so overlapping recomputations never leave
stale travel times on the board.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from commute_planner.analysis.travel_matrix import build_notification, clear_travel_times, recompute

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from commute_planner.schemas import Destination, Notification, Property
    from commute_planner.travel import TravelTimeService

logger = logging.getLogger(__name__)


class PropertyBoard:
    """Holds listings, recomputes their travel times, reports progress."""

    def __init__(
        self,
        service: TravelTimeService,
        properties: Sequence[Property] = (),
        *,
        notify: Callable[[Notification], None] | None = None,
    ) -> None:
        self.service = service
        self._properties: list[Property] = list(properties)
        self._notify = notify
        self._generation = 0
        self._in_flight = 0

    @property
    def properties(self) -> list[Property]:
        """Current listings (a copy; the board owns the list)."""
        return list(self._properties)

    @property
    def is_calculating(self) -> bool:
        """True while any travel-time batch is still running."""
        return self._in_flight > 0

    def replace_properties(self, properties: Sequence[Property]) -> None:
        """Swap the listing set; any batch still running is superseded."""
        self._generation += 1
        self._properties = list(properties)

    async def set_destinations(self, destinations: Sequence[Destination]) -> bool:
        """
        Recompute travel times for ``destinations``.

        Returns True if this batch's result was applied, False if a newer
        trigger superseded it while it ran.
        """
        self._generation += 1
        generation = self._generation

        if not destinations:
            self._properties = clear_travel_times(self._properties)
            return True
        if not self._properties:
            return True

        snapshot = list(self._properties)
        destinations = list(destinations)
        self._in_flight += 1
        try:
            result = await recompute(self.service, snapshot, destinations)
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.info("Discarding stale batch %d (generation %d)", result.batch_id, generation)
            return False

        self._properties = result.properties
        if self._notify is not None:
            self._notify(build_notification(result, destinations))
        return True
