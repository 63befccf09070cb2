"""Cross-backend logic: combining listings with travel results.

Dependency rule: analysis/ talks to backends only through
``TravelTimeService``. It never issues HTTP requests itself and carries no
Prefect decorators.

Modules:
  - travel_matrix: listings x destinations -> listings with travel times
"""

from commute_planner.analysis.travel_matrix import (
    BatchResult,
    build_notification,
    clear_travel_times,
    recompute,
)

__all__ = ["BatchResult", "build_notification", "clear_travel_times", "recompute"]
