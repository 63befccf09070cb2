"""Human-readable durations and distances for listing cards."""

from __future__ import annotations

import math

#: Shown in place of a value that could not be computed.
UNAVAILABLE = "N/A"


def _round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (``round()`` rounds half to even)."""
    return math.floor(value + 0.5)


def format_duration(seconds: float) -> str:
    """
    Format a duration, rounded to the nearest minute.

    ``"25 min"`` below an hour, otherwise ``"1h"`` or ``"1h 30m"``.
    """
    minutes = _round_half_up(seconds / 60)
    if minutes < 60:
        return f"{minutes} min"
    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"


def format_distance(meters: float) -> str:
    """``"500m"`` below 1 km, ``"1.5km"`` below 10 km, ``"12km"`` beyond."""
    if meters < 1000:
        return f"{_round_half_up(meters)}m"
    km = meters / 1000
    if km < 10:
        return f"{km:.1f}km"
    return f"{_round_half_up(km)}km"
