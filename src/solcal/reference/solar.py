# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from math import fmod

from ..core.types import SolarEvent
from ..engines.periodic import J2000, DAYS_PER_CENTURY


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000) / DAYS_PER_CENTURY


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar coordinates (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    Computes true and apparent solar longitude for a given JD(TT)
    using truncated series expansions (accurate to ~0.01 deg).
    """
    T = T_centuries(jd_tt)
    T2 = T * T

    # Geometric mean longitude and mean anomaly
    L0_deg = wrap_deg(280.46646 + 36000.76983 * T + 0.0003032 * T2)
    M_rad = math.radians(357.52911 + 35999.05029 * T - 0.0001537 * T2)

    # Equation of Center (C_sun)
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T2) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )

    L_true = wrap_deg(L0_deg + C_sun)

    # Apparent longitude with aberration and leading nutation
    Omega_rad = math.radians(125.04 - 1934.136 * T)
    L_app = wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def longitude_residual_deg(event: SolarEvent) -> float:
    """
    Apparent solar longitude at the event instant minus the event's defining
    longitude, wrapped to [-180, 180). The Sun moves ~0.0007 deg per minute.
    """
    coords = solar_longitude(event.julian_day)
    return wrap180(coords.L_app_deg - event.kind.longitude_deg)
