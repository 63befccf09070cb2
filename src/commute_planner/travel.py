"""
Travel-time service: geocode a destination, then route to it.

The backends are synchronous (``requests``); each backend call is awaited
through ``asyncio.to_thread`` so a batch suspends at every network call and
the pipelines for different destinations overlap.

Example::

    service = TravelTimeService(OsrmBackend())
    camden = Coordinate(lon=-0.1426, lat=51.5392)
    metric = asyncio.run(
        service.calculate_one(camden, "King's Cross, London", TransportMode.DRIVING)
    )
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from commute_planner.services.concurrency import gather_ordered

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commute_planner.datasources.base import TravelBackend
    from commute_planner.schemas import (
        Coordinate,
        TransportMode,
        TravelMetric,
        TravelQuery,
        TravelResult,
    )

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_SCOPE = "gb"


class TravelTimeService:
    """
    Computes travel metrics from one origin to destination addresses.

    Holds no mutable state; safe to share between concurrent callers.
    """

    def __init__(
        self,
        backend: TravelBackend,
        *,
        country_scope: str = DEFAULT_COUNTRY_SCOPE,
        max_concurrency: int | None = None,
    ) -> None:
        self.backend = backend
        self.country_scope = country_scope
        self.max_concurrency = max_concurrency

    async def calculate_one(
        self,
        origin: Coordinate,
        destination_address: str,
        mode: TransportMode | str,
    ) -> TravelMetric | None:
        """
        Travel metric from ``origin`` to ``destination_address``.

        Returns None when the address cannot be resolved, no route exists, or
        anything else goes wrong. Never raises.
        """
        try:
            target = await asyncio.to_thread(
                self.backend.resolve, destination_address, self.country_scope
            )
            if target is None:
                logger.info("No coordinates for %r", destination_address)
                return None
            metric = await asyncio.to_thread(self.backend.route, origin, target, mode)
            if metric is None:
                logger.info("No %s route to %r", mode, destination_address)
            return metric
        except Exception:
            logger.exception("Travel time calculation failed for %r", destination_address)
            return None

    async def calculate_multiple_destinations(
        self,
        origin: Coordinate,
        destinations: Sequence[TravelQuery],
    ) -> TravelResult:
        """
        Travel metrics from ``origin`` to every destination, concurrently.

        ``result[i]`` belongs to ``destinations[i]``; failures are None in place.
        """
        outcomes = await gather_ordered(
            lambda dest: self.calculate_one(origin, dest.address, dest.mode),
            destinations,
            limit=self.max_concurrency,
        )
        results: TravelResult = []
        for dest, outcome in zip(destinations, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                logger.error("Pipeline for %r raised %r", dest.address, outcome)
                results.append(None)
            else:
                results.append(outcome)
        return results
