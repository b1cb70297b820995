"""Repository classes for data access."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .models import LockedWeek


class WeekLockedError(RuntimeError):
    """Raised when a commit targets a week that is already locked."""

    def __init__(self, week_key: str):
        super().__init__(f"Week {week_key} is already locked")
        self.week_key = week_key


class HistoryRepository:
    """Repository for locked-week data access."""

    @staticmethod
    def get_all(session: Session) -> List[LockedWeek]:
        """Get all locked weeks, oldest lock first."""
        return session.query(LockedWeek).order_by(LockedWeek.locked_at).all()

    @staticmethod
    def get_by_key(session: Session, week_key: str) -> Optional[LockedWeek]:
        """Get a locked week by key."""
        return session.query(LockedWeek).filter(LockedWeek.week_key == week_key).first()

    @staticmethod
    def exists(session: Session, week_key: str) -> bool:
        return HistoryRepository.get_by_key(session, week_key) is not None

    @staticmethod
    def create(session: Session, week: LockedWeek) -> LockedWeek:
        """
        Insert a locked week in a single transaction.

        Raises:
            WeekLockedError: If the key already exists (nothing is written)
        """
        if HistoryRepository.exists(session, week.week_key):
            raise WeekLockedError(week.week_key)
        session.add(week)
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise WeekLockedError(week.week_key) from e
        session.refresh(week)
        return week
