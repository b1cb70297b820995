"""Roster engine: greedy scheduler and the generate/lock orchestrator."""

from .base import BaseScheduler
from .greedy import GreedyScheduler
from .orchestrator import ScheduleOutcome, build_week_schedule, lock_week

__all__ = [
    "BaseScheduler",
    "GreedyScheduler",
    "ScheduleOutcome",
    "build_week_schedule",
    "lock_week",
]
