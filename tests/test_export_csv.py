"""Tests for CSV exports."""

import pandas as pd

from cafe_roster.domain.types import WeeklyRoster
from cafe_roster.io.export_csv import export_load_csv, export_roster_csv, roster_grid
from cafe_roster.services.load import LoadEntry


def _roster():
    roster = WeeklyRoster.empty()
    roster.assign("Mon", 1, ["An", "Bình"])
    roster.assign("Sun", 3, ["Chi"])
    return roster


def test_roster_grid_layout():
    grid = roster_grid(_roster(), {1: "07:00 - 12:30"})
    assert list(grid.columns) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert list(grid.index) == ["Shift 1 (07:00 - 12:30)", "Shift 2", "Shift 3"]
    assert grid.loc["Shift 1 (07:00 - 12:30)", "Mon"] == "An, Bình"
    assert grid.loc["Shift 3", "Sun"] == "Chi"
    assert grid.loc["Shift 2", "Tue"] == ""


def test_export_roster_csv(tmp_path):
    path = tmp_path / "roster.csv"
    assert export_roster_csv(_roster(), path) == 3

    df = pd.read_csv(path, index_col=0, keep_default_na=False)
    assert df.loc["Shift 1", "Mon"] == "An, Bình"
    assert df.shape == (3, 7)


def test_export_load_csv(tmp_path):
    path = tmp_path / "load.csv"
    entries = [LoadEntry("E1", "An", 2, 5), LoadEntry("E2", "Bình", 0, 1)]
    assert export_load_csv(entries, path) == 2

    df = pd.read_csv(path)
    assert list(df.columns) == ["employee_id", "name", "current", "past", "total"]
    assert df["past"].tolist() == [3, 1]
