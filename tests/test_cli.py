# tests/test_cli.py

from amlich import cli


def test_day(capsys):
    assert cli.main(["day", "2000-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "2000-01-01 Sat 25/11/1999 AL"


def test_bare_date_is_day(capsys):
    assert cli.main(["2019-02-05"]) == 0
    assert capsys.readouterr().out.strip() == "2019-02-05 Tue 01/01/2019 AL"


def test_day_marks_leap_month(capsys):
    assert cli.main(["day", "2017-08-05"]) == 0
    assert capsys.readouterr().out.strip() == "2017-08-05 Sat 14/06/2017 AL *"


def test_lunar(capsys):
    assert cli.main(["lunar", "1", "1", "2024"]) == 0
    assert capsys.readouterr().out.strip() == "2024-02-10"

    assert cli.main(["lunar", "1", "6", "2017", "--leap"]) == 0
    assert capsys.readouterr().out.strip() == "2017-07-23"


def test_tz_flag(capsys):
    assert cli.main(["--tz", "8", "lunar", "1", "1", "2024"]) == 0
    assert capsys.readouterr().out.strip() == "2024-02-10"


def test_month(capsys):
    assert cli.main(["month", "2019", "9"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "Am lich 09/2019"
    assert len(lines) == 1 + 30 + 1
    assert lines[1] == "2019-09-01 Sun 03/08/2019 AL"
    assert lines[-1] == "03/08/2019 AL to 02/09/2019 AL"


def test_leap_mismatch_is_reported(capsys):
    assert cli.main(["lunar", "1", "5", "2019", "--leap"]) == 2
    assert "error:" in capsys.readouterr().err


def test_invalid_date_is_reported(capsys):
    assert cli.main(["day", "2019-02-30"]) == 2
    assert "Invalid civil date" in capsys.readouterr().err


def test_diag_dispatch(capsys):
    assert cli.main(["diag", "new-years", "--from-year", "2024", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "10/02/2024" in out
    assert "29/01/2025" in out


def test_global_tz_reaches_diagnostics(capsys):
    assert cli.main(["--tz", "8", "diag", "round-trip", "--N", "1"]) == 0
    assert "Testing UTC+8" in capsys.readouterr().out

    assert cli.main(["--tz", "8", "diag", "leap-months", "--start-year", "2017", "--end-year", "2017"]) == 0
    assert "UTC+8:" in capsys.readouterr().out


def test_env_tz_reaches_diagnostics(capsys, monkeypatch):
    monkeypatch.setenv("AMLICH_TZ_HOURS", "9")
    assert cli.main(["diag", "new-years", "--from-year", "2024", "--to-year", "2024"]) == 0
    assert "UTC+9" in capsys.readouterr().out


def test_diag_zone_flag_wins(capsys):
    assert cli.main(["--tz", "8", "diag", "round-trip", "--tz", "6", "--N", "1"]) == 0
    assert "Testing UTC+6" in capsys.readouterr().out
