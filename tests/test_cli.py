# tests/test_cli.py

import json

import pytest

from solcal.cli import main


def test_event_text(capsys):
    assert main(["event", "2003", "march"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("March equinox 2003")
    assert "UTC        = 2003-03-21T0" in out
    assert "JDE0       = 2452719.536963" in out


def test_event_json(capsys):
    assert main(["event", "2003", "march-equinox", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["kind"] == "march-equinox"
    assert data["year"] == 2003
    assert data["mean_julian_day"] == pytest.approx(2452719.536962585, abs=1e-6)
    assert data["timestamp"].startswith("2003-03-21T")


def test_year(capsys):
    assert main(["year", "2024"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("March equinox")
    assert "2024-12-21" in lines[3]


def test_year_json(capsys):
    assert main(["year", "1999", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [d["kind"] for d in data] == ["march-equinox", "june-solstice", "september-equinox", "december-solstice"]


def test_jd(capsys):
    assert main(["jd", "2451545.0"]) == 0
    assert capsys.readouterr().out.strip() == "2000-01-01T12:00:00Z"


def test_info(capsys):
    assert main(["info", "june"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["month"] == 6
    assert data["slug"] == "june-solstice"


def test_out_of_range_reports_error(capsys):
    assert main(["event", "1899", "march"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("solcal: error:")
    assert "out of range" in err


def test_unknown_kind_reports_error(capsys):
    assert main(["event", "2003", "winter"]) == 2
    assert "Unknown event kind" in capsys.readouterr().err


def test_bad_jd_reports_error(capsys):
    assert main(["jd", "1e12"]) == 2
    assert "Cannot convert" in capsys.readouterr().err


def test_table(capsys):
    assert main(["table", "--from-year", "2000", "--to-year", "2001"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("Year")
    assert lines[2].startswith("2000")
    assert "03-20" in lines[2]


def test_verbose_flag(capsys):
    assert main(["-v", "event", "2010", "september"]) == 0
    assert "September equinox 2010" in capsys.readouterr().out
