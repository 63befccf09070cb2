"""Static reference data.

Data that doesn't change with API calls: sample listings, map defaults.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/models
2. Re-export from this ``__init__.py``
"""

from commute_planner.reference.listings import LONDON_CENTER as LONDON_CENTER
from commute_planner.reference.listings import SAMPLE_PROPERTIES as SAMPLE_PROPERTIES
