# tests/test_time.py

import pytest
import random
from datetime import date, datetime, timedelta, timezone

from solcal.core import time as ts
from solcal.core.errors import ConversionError

UTC = timezone.utc


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(10000):
        jdn_in = random.randint(ts.JDN_MIN, ts.JDN_MAX)
        d = ts.jdn_to_date(jdn_in)
        assert ts.date_to_jdn(d) == jdn_in


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert ts.date_to_jdn(date(2000, 1, 1)) == 2451545
    assert ts.from_timestamp(datetime(2000, 1, 1, 12, tzinfo=UTC)) == 2451545.0

    # Unix epoch is 1970-01-01 00:00:00 UTC
    assert ts.from_timestamp(datetime(1970, 1, 1, tzinfo=UTC)) == 2440587.5


def test_jd_jdn_relation():
    jdn = ts.date_to_jdn(date(2026, 2, 24))
    jd0 = ts.jdn_to_jd(jdn)
    assert ts.jd_to_jdn(jd0) == jdn
    # noon maps to the same civil day
    assert ts.jd_to_jdn(jd0 + 0.5) == jdn


@pytest.mark.parametrize(
    "jd, expected",
    [
        (2451435.0, datetime(1999, 9, 13, 12, 0, 0, tzinfo=UTC)),
        (2455435.0, datetime(2010, 8, 26, 12, 0, 0, tzinfo=UTC)),
        (2415435.452, datetime(1901, 2, 19, 22, 50, 53, tzinfo=UTC)),
        (2451544.5, datetime(2000, 1, 1, 0, 0, 0, tzinfo=UTC)),
        (2452719.536962585, datetime(2003, 3, 21, 0, 53, 14, tzinfo=UTC)),
    ],
)
def test_known_julian_days(jd, expected):
    assert ts.to_timestamp(jd) == expected


def test_timestamp_is_utc_with_second_resolution():
    dt = ts.to_timestamp(2451545.123456789)
    assert dt.tzinfo is UTC
    assert dt.utcoffset() == timedelta(0)
    assert dt.microsecond == 0


def test_fraction_rounding_carries_into_next_day():
    # 0.999996 day = 86399.65 s -> rounds to a full day
    assert ts.to_timestamp(2451545.499996) == datetime(2000, 1, 2, 0, 0, 0, tzinfo=UTC)
    # 0.3 s before the millennium, carrying through month and year
    jd = 2451544.5 - 0.3 / 86400.0
    assert ts.to_timestamp(jd) == datetime(2000, 1, 1, 0, 0, 0, tzinfo=UTC)
    # 0.4 s after midnight stays put
    assert ts.to_timestamp(2451544.5 + 0.4 / 86400.0) == datetime(2000, 1, 1, 0, 0, 0, tzinfo=UTC)
    # 0.99999 day = 86399.14 s stays on the last second of the day
    assert ts.to_timestamp(2451545.49999) == datetime(2000, 1, 1, 23, 59, 59, tzinfo=UTC)


def test_round_half_away():
    assert ts.round_half_away(0.5) == 1
    assert ts.round_half_away(2.5) == 3
    assert ts.round_half_away(2.4999) == 2
    assert ts.round_half_away(-2.5) == -3
    assert ts.round_half_away(-0.4) == 0


def test_roundtrip_within_half_second():
    random.seed(42)
    for _ in range(2000):
        jd_in = random.uniform(2415000.0, 2489000.0)
        jd_out = ts.from_timestamp(ts.to_timestamp(jd_in))
        assert jd_out == pytest.approx(jd_in, abs=0.5 / 86400.0 + 1e-9)


def test_from_timestamp_keeps_microseconds_and_offsets():
    dt = datetime(2003, 3, 21, 0, 53, 14, 500000, tzinfo=UTC)
    assert ts.from_timestamp(dt) == pytest.approx(2452719.5 + (3194.5 / 86400.0), abs=1e-9)

    plus_two = timezone(timedelta(hours=2))
    local = datetime(2003, 3, 21, 2, 53, 14, tzinfo=plus_two)
    assert ts.from_timestamp(local) == ts.from_timestamp(datetime(2003, 3, 21, 0, 53, 14, tzinfo=UTC))


def test_from_timestamp_rejects_naive():
    with pytest.raises(ConversionError, match="timezone-aware"):
        ts.from_timestamp(datetime(2003, 3, 21, 0, 53, 14))


def test_calendar_window_edges():
    assert ts.to_timestamp(ts.JD_MIN) == datetime(1, 1, 1, tzinfo=UTC)
    assert ts.to_timestamp(ts.JD_MAX - 1.0) == datetime(9999, 12, 31, tzinfo=UTC)


@pytest.mark.parametrize(
    "jd",
    [float("nan"), float("inf"), float("-inf"), 0.0, -1.0e6, 1.0e9, ts.JD_MIN - 1e-3, ts.JD_MAX],
)
def test_out_of_window_raises(jd):
    with pytest.raises(ConversionError):
        ts.to_timestamp(jd)


def test_rounding_past_last_day_raises():
    with pytest.raises(ConversionError, match="9999"):
        ts.to_timestamp(ts.JD_MAX - 1e-7)


def test_conversion_error_is_value_error():
    with pytest.raises(ValueError):
        ts.to_timestamp(float("nan"))
