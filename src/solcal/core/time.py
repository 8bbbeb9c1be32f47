from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
import math

from .errors import ConversionError


# ============================================================
# Basic JD / JDN helpers
# ============================================================

# datetime can represent 0001-01-01 .. 9999-12-31
JDN_MIN = 1721426
JDN_MAX = 5373484
JD_MIN = JDN_MIN - 0.5
JD_MAX = JDN_MAX + 0.5

SECONDS_PER_DAY = 86400


def jd_to_jdn(jd: float) -> int:
    """
    Convert Julian Date (JD, days from noon) to Julian Day Number (JDN, integer day starting at midnight).

    Standard relation:
      JDN = floor(JD + 0.5)
    """
    return int(math.floor(jd + 0.5))


def jdn_to_jd(jdn: int) -> float:
    """
    JD at midnight UTC of the civil day with the given JDN.
    Since JD starts at noon, midnight is JDN - 0.5.
    """
    return float(jdn) - 0.5


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    r = int(math.floor(abs(x) + 0.5))
    return r if x >= 0 else -r


# ============================================================
# Gregorian calendar date <-> JDN  (Fliegel–Van Flandern)
# ============================================================

def date_to_jdn(d: date) -> int:
    """
    Gregorian date -> JDN (proleptic Gregorian).
    """
    a = (14 - d.month) // 12
    y2 = d.year + 4800 - a
    m2 = d.month + 12 * a - 3
    return d.day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_date(jdn: int) -> date:
    """
    JDN -> Gregorian date (proleptic Gregorian).
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)

    return date(int(year), int(month), int(day))


# ============================================================
# datetime(UTC) <-> JD
# ============================================================

def to_timestamp(jd: float) -> datetime:
    """
    JD -> timezone-aware UTC datetime, rounded to the nearest second.

    The day fraction is rounded half away from zero; a fraction that rounds
    to a full day rolls over to 00:00:00 of the next civil day.
    """
    if not math.isfinite(jd):
        raise ConversionError(jd, "Julian Day must be finite")
    if not (JD_MIN <= jd < JD_MAX):
        raise ConversionError(jd, f"Julian Day outside [{JD_MIN}, {JD_MAX})")

    j = jd + 0.5
    z = int(math.floor(j))
    seconds = round_half_away((j - z) * SECONDS_PER_DAY)
    if seconds >= SECONDS_PER_DAY:
        z += 1
        seconds -= SECONDS_PER_DAY
    if z > JDN_MAX:
        raise ConversionError(jd, "rounds past 9999-12-31")

    d = jdn_to_date(z)
    midnight = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    return midnight + timedelta(seconds=seconds)


def from_timestamp(dt: datetime) -> float:
    """
    Timezone-aware datetime -> JD (UTC). Microseconds are kept.
    """
    if dt.tzinfo is None:
        raise ConversionError(dt, "datetime must be timezone-aware (UTC)")
    dt_utc = dt.astimezone(timezone.utc)
    seconds = dt_utc.hour * 3600 + dt_utc.minute * 60 + dt_utc.second + dt_utc.microsecond / 1e6
    return jdn_to_jd(date_to_jdn(dt_utc.date())) + seconds / SECONDS_PER_DAY
