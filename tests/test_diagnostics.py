# tests/test_diagnostics.py

import pytest

from solcal.diagnostics import events_table


def test_events_table_rows():
    rows = events_table.format_rows(2003, 2004)
    assert rows[0].split()[:3] == ["Year", "March", "equinox"]
    assert set(rows[1]) == {"-"}
    assert rows[2].startswith("2003")
    assert "03-21" in rows[2]
    assert "12-21" in rows[3]


def test_events_table_iso():
    rows = events_table.format_rows(2010, 2010, fmt="iso")
    assert "2010-03-20T17:" in rows[2]
    assert rows[2].count("+00:00") == 4


def test_events_table_rejects_reversed_range():
    with pytest.raises(SystemExit):
        events_table.main(["--from-year", "2010", "--to-year", "2000"])


def test_scan_residuals_shapes_and_bounds():
    np = pytest.importorskip("numpy")
    from solcal.diagnostics.longitude_scan import scan_residuals

    years, res = scan_residuals(np, 1998, 2002)
    assert years.tolist() == [1998, 1999, 2000, 2001, 2002]
    assert res.shape == (5, 4)
    assert float(np.max(np.abs(res))) < 0.02

    _, mean_only = scan_residuals(np, 1998, 2002, periodic=False)
    assert mean_only.shape == (5, 4)
    assert not np.allclose(mean_only, res)


def test_longitude_scan_main(capsys):
    pytest.importorskip("numpy")
    from solcal.diagnostics import longitude_scan

    assert longitude_scan.main(["--from-year", "2000", "--to-year", "2002"]) == 0
    out = capsys.readouterr().out
    assert "Years 2000..2002  (corrected)" in out
    assert "December solstice" in out
