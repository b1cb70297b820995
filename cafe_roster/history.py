"""History store: locked weekly rosters keyed by week key."""

from __future__ import annotations

import json
from typing import Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cafe_roster.domain.models import LockedWeek
from cafe_roster.domain.repositories import HistoryRepository, WeekLockedError
from cafe_roster.domain.types import WeeklyRoster
from cafe_roster.services.constraints import validate_roster


class HistoryStore:
    """
    Append-only view over persisted history.

    Owned by the calling shell and passed into the core; it never overwrites
    an existing week.
    """

    def __init__(self, session: Session, max_per_shift: int = 2):
        self.session = session
        self.max_per_shift = max_per_shift

    def load(self) -> Dict[str, WeeklyRoster]:
        """
        Read every locked week.

        Unreadable data (bad JSON, incomplete rosters, database errors) gives
        an empty history rather than an exception.
        """
        try:
            rows = HistoryRepository.get_all(self.session)
            return {
                row.week_key: WeeklyRoster.from_dict(json.loads(row.roster_json), self.max_per_shift)
                for row in rows
            }
        except (SQLAlchemyError, ValueError) as e:
            self.session.rollback()
            print(f"[WARN] Stored history is unreadable, continuing with empty history: {e}")
            return {}

    def is_locked(self, week_key: str) -> bool:
        try:
            return HistoryRepository.exists(self.session, week_key)
        except SQLAlchemyError as e:
            self.session.rollback()
            print(f"[WARN] Could not read lock state for {week_key}: {e}")
            return False

    def commit(self, week_key: str, roster: WeeklyRoster) -> None:
        """
        Lock ``roster`` under ``week_key``.

        Raises:
            WeekLockedError: If the week is already locked
            ValueError: If the roster breaks capacity or continuity rules
        """
        validate_roster(roster, self.max_per_shift)
        payload = json.dumps(roster.to_dict(), ensure_ascii=False)
        HistoryRepository.create(self.session, LockedWeek(week_key=week_key, roster_json=payload))
        print(f"[OK] Locked week {week_key}")


__all__ = ["HistoryStore", "WeekLockedError"]
