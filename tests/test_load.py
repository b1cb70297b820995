"""Tests for cumulative shift load accounting."""

from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.types import Employee, WeeklyRoster
from cafe_roster.services.load import count_shifts, cumulative_load, load_frame


CURRENT = "08/01 - 14/01"


def _directory():
    return RosterDirectory([Employee("E1", "Alice"), Employee("E2", "Bob"), Employee("E3", "Carol")])


def _roster(cells):
    roster = WeeklyRoster.empty()
    for (day, shift), names in cells.items():
        roster.assign(day, shift, names)
    return roster


def _history():
    return {
        "01/01 - 07/01": _roster({("Mon", 1): ["Alice", "Bob"], ("Tue", 2): ["Alice"], ("Wed", 1): ["Ghost"]}),
        CURRENT: _roster({("Mon", 1): ["Alice"], ("Mon", 2): ["Alice"], ("Fri", 3): ["Alice"]}),
    }


def test_totals_include_other_locked_weeks_only():
    current = _roster({("Mon", 1): ["Bob", "Carol"], ("Sat", 2): ["Bob"]})
    entries = cumulative_load(current, _directory(), _history(), CURRENT)

    assert [(e.name, e.current, e.total) for e in entries] == [
        ("Bob", 2, 3),
        ("Alice", 0, 2),
        ("Carol", 1, 1),
    ]
    assert entries[0].past == 1
    assert entries[0].employee_id == "E2"


def test_missing_current_roster_counts_zero():
    entries = cumulative_load(None, _directory(), _history(), CURRENT)
    by_name = {e.name: e for e in entries}
    assert by_name["Alice"].current == 0
    assert by_name["Alice"].total == 2
    assert by_name["Carol"].total == 0


def test_empty_history():
    current = _roster({("Sun", 3): ["Carol"]})
    entries = cumulative_load(current, _directory(), {}, CURRENT)
    assert entries[0].name == "Carol"
    assert [e.total for e in entries] == [1, 0, 0]


def test_history_is_not_mutated():
    history = _history()
    before = {k: v.to_dict() for k, v in history.items()}
    cumulative_load(_roster({}), _directory(), history, CURRENT)
    assert {k: v.to_dict() for k, v in history.items()} == before


def test_output_is_sorted_by_total_descending():
    df = load_frame(_roster({("Mon", 1): ["Carol"]}), _directory(), _history(), CURRENT)
    assert list(df.columns) == ["employee_id", "name", "current", "past", "total"]
    assert df["total"].is_monotonic_decreasing


def test_count_shifts():
    counts = count_shifts(_roster({("Mon", 1): ["A", "B"], ("Mon", 2): ["A"]}))
    assert counts["A"] == 2
    assert counts["B"] == 1
    assert count_shifts(None).empty
    assert count_shifts(WeeklyRoster.empty()).empty
