"""CSV export utilities for rosters and load reports."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd

from cafe_roster.domain.types import DAYS_ORDER, SHIFTS, WeeklyRoster
from cafe_roster.services.load import LoadEntry


def roster_grid(roster: WeeklyRoster, shift_labels: Dict[int, str] | None = None) -> pd.DataFrame:
    """Shift rows × day columns, names joined with ", "."""
    shift_labels = shift_labels or {}
    data = {
        day: [", ".join(roster.cell(day, shift)) for shift in SHIFTS]
        for day in DAYS_ORDER
    }
    index = [f"Shift {s} ({shift_labels[s]})" if s in shift_labels else f"Shift {s}" for s in SHIFTS]
    return pd.DataFrame(data, index=pd.Index(index, name="shift"))


def export_roster_csv(roster: WeeklyRoster, csv_path: str | Path, shift_labels: Dict[int, str] | None = None) -> int:
    """
    Export a roster as a shift × day grid.

    Args:
        roster: Roster to write
        csv_path: Output path
        shift_labels: Optional shift number -> time range label

    Returns:
        Number of filled shift places written
    """
    roster_grid(roster, shift_labels).to_csv(csv_path)
    count = roster.place_count()
    print(f"[INFO] Exported roster ({count} places) to {csv_path}")
    return count


def export_load_csv(entries: List[LoadEntry], csv_path: str | Path) -> int:
    """
    Export a cumulative load report.

    Returns:
        Number of employees written
    """
    df = pd.DataFrame(
        [
            {"employee_id": e.employee_id, "name": e.name, "current": e.current, "past": e.past, "total": e.total}
            for e in entries
        ],
        columns=["employee_id", "name", "current", "past", "total"],
    )
    df.to_csv(csv_path, index=False)
    print(f"[INFO] Exported load report ({len(df)} employees) to {csv_path}")
    return len(df)
