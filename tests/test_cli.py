# tests/test_cli.py

import pytest

from civcal import cli
from civcal.diagnostics import easter_table, pretty_month, round_trip


def test_day_subcommand(capsys):
    assert cli.main(["day", "2017-04-16"]) == 0
    out = capsys.readouterr().out
    assert "Easter Sunday" in out
    assert "Sunday" in out
    assert "2017-W15" in out


def test_bare_date_shorthand(capsys):
    assert cli.main(["2017-12-24"]) == 0
    out = capsys.readouterr().out
    assert "Christmas eve" in out
    assert "workday   no" in out


def test_day_with_layout_and_region(capsys):
    assert cli.main(["day", "15.06.2017", "--layout", "02.01.2006", "--region", "Mars/Olympus"]) == 0
    out = capsys.readouterr().out
    assert "2017-06-15" in out
    assert "holidays  -" in out
    assert "workday   yes" in out


def test_day_bad_text(capsys):
    assert cli.main(["day", "2017-02-30"]) == 2
    assert "cannot parse" in capsys.readouterr().err


def test_holidays_subcommand(capsys):
    assert cli.main(["holidays", "2017"]) == 0
    out = capsys.readouterr().out
    assert "2017-06-23  Friday     Midsummer Eve" in out
    assert len(out.strip().splitlines()) == 16


def test_regions_subcommand(capsys):
    assert cli.main(["regions"]) == 0
    assert capsys.readouterr().out.strip() == "Europe/Stockholm"


def test_month_subcommand(capsys):
    assert cli.main(["month", "2017", "6"]) == 0
    out = capsys.readouterr().out
    assert "June 2017" in out
    assert "2017-06-23  Midsummer Eve" in out


def test_easter_subcommand(capsys):
    assert cli.main(["easter", "--from-year", "2017", "--to-year", "2017", "--dates", "iso"]) == 0
    out = capsys.readouterr().out
    assert "2017-04-16" in out
    assert "2017-06-04" in out


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        cli.main(["nope"])


def test_round_trip_diagnostic(capsys):
    assert round_trip.main(["--N", "2000", "--seed", "1"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_pretty_month_marks(capsys):
    pretty_month.month_calendar(2017, 12, region="Europe/Stockholm")
    out = capsys.readouterr().out
    assert out.startswith("Europe/Stockholm  December 2017")
    assert "2017-12-24  Christmas eve" in out


def test_easter_table_julian_marker(capsys):
    assert easter_table.main(["--from-year", "1066", "--to-year", "1066"]) == 0
    out = capsys.readouterr().out
    assert "04-16" in out
    assert "julian" in out


def test_easter_scatter_series():
    np = pytest.importorskip("numpy")
    from civcal.diagnostics import easter_scatter

    assert easter_scatter.days_after_march_21(2017) == 26
    x, y = easter_scatter.build_series(np, 2000, 2030)
    assert len(x) == len(y) == 31
    counts = easter_scatter.histogram(np, y)
    assert counts.sum() == 31
