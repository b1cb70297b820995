"""Hard rules on a weekly roster."""

from __future__ import annotations

from typing import List, Sequence

from cafe_roster.domain.types import DAYS_ORDER, SHIFTS, WeeklyRoster


def is_broken_shift(roster: WeeklyRoster, name: str, day: str) -> bool:
    """True if ``name`` works shift 1 and shift 3 of ``day`` but not shift 2."""
    return (
        roster.is_assigned(name, day, 1)
        and roster.is_assigned(name, day, 3)
        and not roster.is_assigned(name, day, 2)
    )


def passes_continuity(roster: WeeklyRoster, name: str, day: str, shift: int) -> bool:
    """
    Check whether ``name`` may take ``shift`` on ``day`` given the roster so far.

    Only shift 3 is restricted: someone on shift 1 without shift 2 cannot
    come back for the evening.
    """
    if shift != 3:
        return True
    return not (roster.is_assigned(name, day, 1) and not roster.is_assigned(name, day, 2))


def filter_continuity(roster: WeeklyRoster, candidates: Sequence[str], day: str, shift: int) -> List[str]:
    return [name for name in candidates if passes_continuity(roster, name, day, shift)]


def validate_roster(roster: WeeklyRoster, max_per_shift: int) -> None:
    """
    Validate a roster against capacity and continuity rules.

    Args:
        roster: Roster to check
        max_per_shift: Capacity of every cell

    Raises:
        ValueError: If any rule is violated
    """
    for day in DAYS_ORDER:
        for shift in SHIFTS:
            names = roster.cell(day, shift)
            if len(names) > max_per_shift:
                raise ValueError(
                    f"{day} shift {shift} has {len(names)} people assigned (capacity {max_per_shift})"
                )
            if len(set(names)) != len(names):
                raise ValueError(f"{day} shift {shift} lists the same person twice: {names}")
        for name in set(roster.cell(day, 1)) | set(roster.cell(day, 3)):
            if is_broken_shift(roster, name, day):
                raise ValueError(f"{name} has a broken shift on {day} (shift 1 and 3 without shift 2)")
