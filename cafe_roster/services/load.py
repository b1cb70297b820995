"""Cumulative per-employee shift load across locked weeks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional

import pandas as pd

from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.types import WeeklyRoster


@dataclass
class LoadEntry:
    employee_id: str
    name: str
    current: int
    total: int

    @property
    def past(self) -> int:
        return self.total - self.current


def count_shifts(roster: Optional[WeeklyRoster]) -> pd.Series:
    """Shifts per name in one roster; empty for a roster not yet generated."""
    if roster is None:
        return pd.Series(dtype="int64")
    return roster.to_frame()["name"].value_counts()


def load_frame(
    current_roster: Optional[WeeklyRoster],
    directory: RosterDirectory,
    history: Mapping[str, WeeklyRoster],
    current_week_key: str,
) -> pd.DataFrame:
    """
    Current-week and cumulative shift counts for every directory employee.

    History entries under ``current_week_key`` are skipped so a locked current
    week is not counted twice. History is only read.

    Args:
        current_roster: Roster of the week under review (None if not generated)
        directory: Employee universe, defines the rows
        history: Week key -> locked roster
        current_week_key: Key of the week under review

    Returns:
        DataFrame with employee_id, name, current, past, total; sorted by
        total descending
    """
    current = count_shifts(current_roster)
    past_frames = [roster.to_frame() for key, roster in history.items() if key != current_week_key]
    if past_frames:
        past = pd.concat(past_frames, ignore_index=True)["name"].value_counts()
    else:
        past = pd.Series(dtype="int64")

    df = pd.DataFrame(
        {
            "employee_id": [e.employee_id for e in directory],
            "name": [e.name for e in directory],
        }
    )
    df["current"] = df["name"].map(current).fillna(0).astype(int)
    df["past"] = df["name"].map(past).fillna(0).astype(int)
    df["total"] = df["current"] + df["past"]
    return df.sort_values("total", ascending=False, kind="stable").reset_index(drop=True)


def cumulative_load(
    current_roster: Optional[WeeklyRoster],
    directory: RosterDirectory,
    history: Mapping[str, WeeklyRoster],
    current_week_key: str,
) -> List[LoadEntry]:
    """Ordered load entries, highest total first."""
    df = load_frame(current_roster, directory, history, current_week_key)
    return [
        LoadEntry(
            employee_id=str(row.employee_id),
            name=str(row.name),
            current=int(row.current),
            total=int(row.total),
        )
        for row in df.itertuples(index=False)
    ]
