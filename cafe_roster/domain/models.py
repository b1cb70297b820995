"""SQLAlchemy models for locked roster history."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class LockedWeek(Base):
    """A committed weekly roster, stored as JSON under its week key."""

    __tablename__ = "locked_weeks"

    week_key = Column(String(20), primary_key=True)  # "DD/MM - DD/MM"
    roster_json = Column(Text, nullable=False)
    locked_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<LockedWeek(week='{self.week_key}', locked_at={self.locked_at})>"
