"""Exception hierarchy for commute-planner.

Backends raise these internally; ``TravelBackend.resolve``/``route`` fold the
lookup failures into ``None`` so they never reach a batch.
"""


class CommutePlannerError(Exception):
    """Base exception for all commute-planner errors."""


class ConfigurationError(CommutePlannerError):
    """A backend could not be constructed from the given settings."""


class AddressNotFound(CommutePlannerError):
    """The geocoder found no match for an address."""

    def __init__(self, address: str, country_scope: str):
        self.address = address
        self.country_scope = country_scope
        super().__init__(f"No match found for '{address}' in '{country_scope}'")


class RouteUnavailable(CommutePlannerError):
    """The router found no path between two points for a profile."""

    def __init__(self, profile: str, detail: str):
        self.profile = profile
        self.detail = detail
        super().__init__(f"No route for profile '{profile}': {detail}")


class TransportFailure(CommutePlannerError):
    """Network error or unparseable response from a backend."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"Request to {url} failed: {detail}")
