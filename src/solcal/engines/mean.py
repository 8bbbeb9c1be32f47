from __future__ import annotations

from enum import Enum
from typing import Dict, Sequence, Tuple
import numbers

from ..core.errors import OutOfRangeError
from ..core.types import EventKind

YEAR_MIN = 1900
YEAR_MAX = 2100
PIVOT_YEAR = 2000

Coeffs = Tuple[float, float, float, float, float]


class SubRange(Enum):
    """Year windows with their own mean-event polynomial; value is the origin year."""
    BEFORE_2000 = 1900
    FROM_2000 = 2000

    @property
    def origin(self) -> int:
        return self.value


# JDE0 = c0 + c1*y + c2*y^2 + c3*y^3 + c4*y^4,  y = (year - origin) / 1000
#
# FROM_2000 is Meeus, Astronomical Algorithms (2nd ed.), Table 27.B.
# BEFORE_2000 is the same quartic re-expanded about 1900 (y -> y - 0.1),
# so both rows give the same JDE0 at the pivot.
MEAN_COEFFICIENTS: Dict[SubRange, Dict[EventKind, Coeffs]] = {
    SubRange.BEFORE_2000: {
        EventKind.MARCH_EQUINOX: (2415099.572956953, 365242.36358098, 0.0528888, -0.003882, -0.00057),
        EventKind.JUNE_SOLSTICE: (2415192.40509059, 365241.6256476, 0.000568, 0.00900, -0.00030),
        EventKind.SEPTEMBER_EQUINOX: (2415286.014222208, 365242.04091798, -0.1167142, 0.003058, 0.00078),
        EventKind.DECEMBER_SOLSTICE: (2415375.784856962, 365242.75268782, -0.0597418, -0.008358, 0.00032),
    },
    SubRange.FROM_2000: {
        EventKind.MARCH_EQUINOX: (2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057),
        EventKind.JUNE_SOLSTICE: (2451716.56767, 365241.62603, 0.00325, 0.00888, -0.00030),
        EventKind.SEPTEMBER_EQUINOX: (2451810.21715, 365242.01767, -0.11575, 0.00337, 0.00078),
        EventKind.DECEMBER_SOLSTICE: (2451900.05952, 365242.74049, -0.06223, -0.00823, 0.00032),
    },
}


def check_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, numbers.Integral):
        raise TypeError(f"year must be an integer, got {type(year).__name__}")
    if not (YEAR_MIN <= year <= YEAR_MAX):
        raise OutOfRangeError(int(year), YEAR_MIN, YEAR_MAX)
    return int(year)


def sub_range_for(year: int) -> SubRange:
    return SubRange.BEFORE_2000 if check_year(year) < PIVOT_YEAR else SubRange.FROM_2000


def mean_coefficients(year: int, kind: EventKind) -> Coeffs:
    return MEAN_COEFFICIENTS[sub_range_for(year)][EventKind.parse(kind)]


def eval_polynomial(coeffs: Sequence[float], y: float) -> float:
    """Horner evaluation of c0 + c1*y + ... + cn*y^n."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * y + c
    return acc


def estimate_mean(year: int, kind: EventKind) -> float:
    """
    Mean Julian Ephemeris Day (JDE0) of the event in the given year.

    Raises OutOfRangeError for years outside 1900..2100.
    """
    sr = sub_range_for(year)
    y = (year - sr.origin) / 1000.0
    return eval_polynomial(MEAN_COEFFICIENTS[sr][EventKind.parse(kind)], y)
