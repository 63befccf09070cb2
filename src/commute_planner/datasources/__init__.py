"""Geocoding and routing backends.

Every backend implements the ``TravelBackend`` contract (``resolve`` +
``route``) from ``base.py``, and lives in its own subdirectory:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, profile mapping, fixed query params
    └── backend.py        # TravelBackend subclass

Adding a new backend
--------------------
1. Create ``datasources/{name}/`` with the files above.

2. Subclass ``TravelBackend`` and implement the strict methods::

       class MyBackend(TravelBackend):
           name = "mine"
           profiles = {TransportMode.DRIVING: "car", ...}

           def geocode(self, address, country_scope) -> Coordinate: ...
           def directions(self, origin, destination, profile) -> tuple[float, float]: ...

   Raise ``AddressNotFound``/``RouteUnavailable``/``TransportFailure``;
   the base class turns them into ``None``.

3. Register it in ``create_backend()`` below and in ``Settings.backend``.

4. Add tests in ``tests/test_{name}.py``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from commute_planner.datasources.base import TravelBackend
from commute_planner.datasources.mapbox import MapboxBackend
from commute_planner.datasources.osrm import OsrmBackend
from commute_planner.exceptions import ConfigurationError
from commute_planner.services.http import build_retry, create_session

if TYPE_CHECKING:
    from commute_planner.config import Settings


def create_backend(settings: Settings) -> TravelBackend:
    """Build the backend named by ``settings.backend`` with its own HTTP session."""
    session = create_session(
        retry=build_retry(settings.http_retries),
        timeout=settings.http_timeout,
    )
    if settings.backend == "osrm":
        return OsrmBackend(settings.osrm_url, settings.nominatim_url, session=session)
    if settings.backend == "mapbox":
        token = settings.mapbox_access_token
        if token is None:
            raise ConfigurationError(
                "COMMUTE_PLANNER_MAPBOX_ACCESS_TOKEN must be set to use the mapbox backend"
            )
        return MapboxBackend(token.get_secret_value(), session=session)
    raise ConfigurationError(f"Unknown backend: {settings.backend!r}")


__all__ = ["MapboxBackend", "OsrmBackend", "TravelBackend", "create_backend"]
