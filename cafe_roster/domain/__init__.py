"""Domain value types, models and data access layer."""

from .types import DAYS_ORDER, SHIFTS, Employee, Registration, Slot, WeeklyRoster, all_slots
from .models import Base, LockedWeek
from .repositories import HistoryRepository, WeekLockedError

__all__ = [
    "DAYS_ORDER",
    "SHIFTS",
    "Employee",
    "Registration",
    "Slot",
    "WeeklyRoster",
    "all_slots",
    "Base",
    "LockedWeek",
    "HistoryRepository",
    "WeekLockedError",
]
