"""Orchestrator - builds and locks the roster for a week key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from cafe_roster.config import RosterConfig
from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.repositories import WeekLockedError
from cafe_roster.domain.types import Registration, WeeklyRoster
from cafe_roster.history import HistoryStore
from cafe_roster.services.scoring import RandomTieBreaker

from .base import BaseScheduler
from .greedy import GreedyScheduler


GENERATED = "generated"
LOCKED = "locked"
UNCHANGED = "unchanged"


@dataclass
class ScheduleOutcome:
    """
    Result of a generate or lock request.

    ``status`` is ``"unchanged"`` when the week was already locked; ``roster``
    is then the stored roster (or None if it could not be read).
    """

    week_key: str
    status: str
    roster: Optional[WeeklyRoster]

    @property
    def changed(self) -> bool:
        return self.status != UNCHANGED


def default_scheduler(cfg: RosterConfig, seed: Optional[int] = None) -> BaseScheduler:
    seed = seed if seed is not None else cfg.tie_break_seed
    return GreedyScheduler(max_per_shift=cfg.max_per_shift, tie_breaker=RandomTieBreaker(seed))


def _unchanged(history: HistoryStore, week_key: str) -> ScheduleOutcome:
    print(f"[WARN] Week {week_key} is locked; its roster will not be regenerated")
    return ScheduleOutcome(week_key, UNCHANGED, history.load().get(week_key))


def build_week_schedule(
    registrations: Mapping[str, Registration],
    directory: RosterDirectory,
    history: HistoryStore,
    week_key: str,
    cfg: Optional[RosterConfig] = None,
    scheduler: Optional[BaseScheduler] = None,
    lock: bool = False,
) -> ScheduleOutcome:
    """
    Build the roster for ``week_key`` unless that week is locked.

    Args:
        registrations: Availability keyed by employee name
        directory: Employee universe
        history: Injected history store
        week_key: Target week
        cfg: RosterConfig (capacity and tie-break seed)
        scheduler: Optional scheduler override
        lock: If True, commit the new roster to history

    Returns:
        ScheduleOutcome; status "unchanged" for a locked week
    """
    cfg = cfg or RosterConfig()
    if history.is_locked(week_key):
        return _unchanged(history, week_key)

    scheduler = scheduler or default_scheduler(cfg)
    print(f"[INFO] Building roster for {week_key} from {len(registrations)} registrations")
    roster = scheduler.make_schedule(registrations, directory)
    print(f"[OK] Assigned {roster.place_count()} shift places across 21 cells")

    if lock:
        return lock_week(history, week_key, roster)
    return ScheduleOutcome(week_key, GENERATED, roster)


def lock_week(history: HistoryStore, week_key: str, roster: WeeklyRoster) -> ScheduleOutcome:
    """Commit ``roster`` for ``week_key``; an already-locked week is left as is."""
    try:
        history.commit(week_key, roster)
    except WeekLockedError:
        return _unchanged(history, week_key)
    return ScheduleOutcome(week_key, LOCKED, roster)
