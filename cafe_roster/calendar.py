"""Week key and next-week date helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Dict, Optional

from cafe_roster.domain.types import DAYS_ORDER


def format_day(d: date) -> str:
    return d.strftime("%d/%m")


def next_week_dates(now: Optional[datetime | date] = None) -> Dict[str, date]:
    """
    Dates of the Monday-start week following ``now``.

    Sunday counts as the last day of its week, so on a Sunday the target
    week starts the next day.
    """
    today = (now or datetime.now())
    if isinstance(today, datetime):
        today = today.date()
    this_monday = today - timedelta(days=today.weekday())
    next_monday = this_monday + timedelta(days=7)
    return {day: next_monday + timedelta(days=i) for i, day in enumerate(DAYS_ORDER)}


def week_key(now: Optional[datetime | date] = None) -> str:
    """Week key ``"DD/MM - DD/MM"`` (Monday - Sunday) of the week after ``now``."""
    dates = next_week_dates(now)
    return f"{format_day(dates['Mon'])} - {format_day(dates['Sun'])}"
