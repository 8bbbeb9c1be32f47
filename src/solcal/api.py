from __future__ import annotations

import logging
from typing import Any, Dict, List, Union

from .core.time import to_timestamp
from .core.types import AnnualSolarEvents, EventKind, SolarEvent
from .engines.mean import MEAN_COEFFICIENTS, check_year, estimate_mean
from .engines.periodic import correction_days

logger = logging.getLogger(__name__)

KindLike = Union[EventKind, str]


def compute_event(year: int, kind: KindLike) -> SolarEvent:
    """
    Instant of one equinox or solstice.

    Mean estimate -> periodic correction -> UTC timestamp. Raises
    OutOfRangeError for years outside 1900..2100 before anything is computed,
    and ConversionError if the final JD has no calendar representation.
    """
    kind = EventKind.parse(kind)
    year = check_year(year)

    jde0 = estimate_mean(year, kind)
    corr = correction_days(jde0)
    jde = jde0 + corr
    ts = to_timestamp(jde)
    logger.debug("%s %d: JDE0=%.6f corr=%+.6f d JDE=%.6f -> %s", kind, year, jde0, corr, jde, ts.isoformat())

    return SolarEvent(year=year, kind=kind, julian_day=jde, timestamp=ts, mean_julian_day=jde0)


def annual_events(year: int) -> AnnualSolarEvents:
    """All four solar events of a year."""
    check_year(year)
    return AnnualSolarEvents(
        year=year,
        march_equinox=compute_event(year, EventKind.MARCH_EQUINOX),
        june_solstice=compute_event(year, EventKind.JUNE_SOLSTICE),
        september_equinox=compute_event(year, EventKind.SEPTEMBER_EQUINOX),
        december_solstice=compute_event(year, EventKind.DECEMBER_SOLSTICE),
    )


def list_events() -> List[str]:
    return [k.slug for k in EventKind]


def event_info(kind: KindLike) -> Dict[str, Any]:
    kind = EventKind.parse(kind)
    return {
        "slug": kind.slug,
        "label": kind.label,
        "month": kind.month,
        "longitude_deg": kind.longitude_deg,
        "coefficients": {
            f"{sr.name.lower()} (origin {sr.origin})": table[kind]
            for sr, table in MEAN_COEFFICIENTS.items()
        },
    }
