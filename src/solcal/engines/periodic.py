from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import math

J2000 = 2451545.0          # JD of J2000.0
DAYS_PER_CENTURY = 36525.0
TERM_UNIT_DAYS = 0.00001   # the series is tabulated in units of 1e-5 day


@dataclass(frozen=True)
class PeriodicTerm:
    """amplitude * cos(phase + rate*T), angles in degrees, T in Julian centuries."""
    amplitude: float
    phase_deg: float
    rate_deg: float

    def eval(self, T: float) -> float:
        return self.amplitude * math.cos(math.radians(self.phase_deg + self.rate_deg * T))


# Meeus, Astronomical Algorithms (2nd ed.), Table 27.C: (A, B, C)
PERIODIC_TERMS: Tuple[PeriodicTerm, ...] = tuple(
    PeriodicTerm(a, b, c)
    for a, b, c in (
        (485, 324.96, 1934.136),
        (203, 337.23, 32964.467),
        (199, 342.08, 20.186),
        (182, 27.85, 445267.112),
        (156, 73.14, 45036.886),
        (136, 171.52, 22518.443),
        (77, 222.54, 65928.934),
        (74, 296.72, 3034.906),
        (70, 243.58, 9037.513),
        (58, 119.81, 33718.147),
        (52, 297.17, 150.678),
        (50, 21.02, 2281.226),
        (45, 247.54, 29929.562),
        (44, 325.15, 31555.956),
        (29, 60.93, 4443.417),
        (18, 155.12, 67555.328),
        (17, 288.79, 4562.452),
        (16, 198.04, 62894.029),
        (14, 199.76, 31436.921),
        (12, 95.39, 14577.848),
        (12, 287.11, 31931.756),
        (12, 320.81, 34777.259),
        (9, 227.73, 1222.114),
        (8, 15.45, 16859.074),
    )
)


def time_argument(jde0: float) -> float:
    """T = Julian centuries of JDE0 from J2000.0."""
    return (jde0 - J2000) / DAYS_PER_CENTURY


def amplitude_factor(T: float) -> float:
    """Δλ = 1 + 0.0334 cos W + 0.0007 cos 2W, with W = 35999.373 T - 2.47 degrees."""
    W = math.radians(35999.373 * T - 2.47)
    return 1.0 + 0.0334 * math.cos(W) + 0.0007 * math.cos(2.0 * W)


def periodic_sum(T: float) -> float:
    s = 0.0
    for term in PERIODIC_TERMS:
        s += term.eval(T)
    return s


def correction_days(jde0: float) -> float:
    T = time_argument(jde0)
    return TERM_UNIT_DAYS * periodic_sum(T) / amplitude_factor(T)


def apply_periodic_correction(jde0: float) -> float:
    """
    Corrected JDE of an equinox or solstice from its mean JDE0.

    The same series applies to all four events; only JDE0 differs.
    """
    return jde0 + correction_days(jde0)
