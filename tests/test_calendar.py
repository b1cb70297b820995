"""Tests for week key computation."""

from datetime import date, datetime

from cafe_roster.calendar import format_day, next_week_dates, week_key


def test_week_key_from_midweek():
    assert week_key(date(2026, 10, 17)) == "19/10 - 25/10"


def test_sunday_belongs_to_the_ending_week():
    assert week_key(date(2026, 10, 18)) == "19/10 - 25/10"


def test_monday_targets_the_following_week():
    assert week_key(datetime(2026, 10, 19, 8, 30)) == "26/10 - 01/11"


def test_next_week_dates_cover_monday_to_sunday():
    dates = next_week_dates(date(2026, 12, 30))
    assert list(dates) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert dates["Mon"] == date(2027, 1, 4)
    assert dates["Sun"] == date(2027, 1, 10)
    assert all(d.weekday() == i for i, d in enumerate(dates.values()))


def test_format_day_is_zero_padded():
    assert format_day(date(2026, 3, 5)) == "05/03"
