"""End-to-end tests for the command-line interface."""

import json

import pytest

from cafe_roster.cli import main
from cafe_roster.domain.types import WeeklyRoster


WEEK = "19/10 - 25/10"
SHEET = (
    "Dấu thời gian,Tên nhân viên,Thứ 2,Thứ 3,Lý do\r\n"
    "1,An,Ca 1,Ca 2,\r\n"
    "2,Bình,Ca 1,,Bận học\r\n"
)


@pytest.fixture
def env(tmp_path):
    csv_path = tmp_path / "sheet.csv"
    csv_path.write_text(SHEET, encoding="utf-8")
    return {
        "db": f"sqlite:///{tmp_path / 'roster.db'}",
        "csv": str(csv_path),
        "tmp": tmp_path,
    }


def _generate(env, *extra):
    main(["--db", env["db"], "generate", "--csv", env["csv"], "--week", WEEK, "--seed", "3", *extra])


@pytest.mark.integration
def test_generate_lock_and_regenerate(env, capsys):
    out_json = env["tmp"] / "roster.json"
    _generate(env, "--lock", "--json", str(out_json))
    first = capsys.readouterr().out
    assert "[OK] Locked week 19/10 - 25/10" in first

    roster = WeeklyRoster.from_dict(json.loads(out_json.read_text(encoding="utf-8")))
    assert set(roster.cell("Mon", 1)) == {"An", "Bình"}
    assert roster.cell("Tue", 2) == ["An"]

    _generate(env)
    second = capsys.readouterr().out
    assert "already locked" in second

    main(["--db", env["db"], "history"])
    assert WEEK in capsys.readouterr().out


@pytest.mark.integration
def test_generate_without_lock_writes_nothing(env, capsys):
    out_csv = env["tmp"] / "grid.csv"
    _generate(env, "--out", str(out_csv))
    assert out_csv.exists()

    main(["--db", env["db"], "history"])
    assert "No locked weeks." in capsys.readouterr().out


@pytest.mark.integration
def test_lock_then_report(env, capsys):
    out_json = env["tmp"] / "roster.json"
    _generate(env, "--json", str(out_json))
    main(["--db", env["db"], "lock", "--roster", str(out_json), "--week", WEEK])

    with pytest.raises(SystemExit):
        main(["--db", env["db"], "lock", "--roster", str(out_json), "--week", WEEK])

    capsys.readouterr()
    load_csv = env["tmp"] / "load.csv"
    main(["--db", env["db"], "report", "--csv", env["csv"], "--week", WEEK, "--out", str(load_csv)])
    out = capsys.readouterr().out
    assert "An" in out and "Bình" in out
    assert load_csv.exists()


@pytest.mark.integration
def test_ingest_lists_registrations(env, capsys):
    main(["--db", env["db"], "ingest", "--csv", env["csv"]])
    out = capsys.readouterr().out
    assert "2/10 staff registered" in out
    assert "Bận học" in out


def test_missing_csv_exits(env):
    with pytest.raises(SystemExit) as exc:
        main(["--db", env["db"], "ingest", "--csv", str(env["tmp"] / "nope.csv")])
    assert exc.value.code == 1


@pytest.mark.integration
def test_locked_week_is_reported_without_reading_registrations(env, capsys):
    _generate(env, "--lock")
    capsys.readouterr()

    main([
        "--db", env["db"], "generate",
        "--csv", str(env["tmp"] / "missing.csv"),
        "--week", WEEK,
    ])
    out = capsys.readouterr().out
    assert "already locked" in out
    assert "[ERROR]" not in out
    assert "An, Bình" in out or "Bình, An" in out
