"""solcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    compute_event,
    annual_events,
    list_events,
    event_info,
)
from .core.errors import SolcalError, OutOfRangeError, ConversionError
from .core.time import to_timestamp, from_timestamp
from .core.types import EventKind, SolarEvent, AnnualSolarEvents
from .engines.mean import estimate_mean, YEAR_MIN, YEAR_MAX
from .engines.periodic import apply_periodic_correction

__all__ = [
    "compute_event",
    "annual_events",
    "list_events",
    "event_info",
    "estimate_mean",
    "apply_periodic_correction",
    "to_timestamp",
    "from_timestamp",
    "EventKind",
    "SolarEvent",
    "AnnualSolarEvents",
    "SolcalError",
    "OutOfRangeError",
    "ConversionError",
    "YEAR_MIN",
    "YEAR_MAX",
]
