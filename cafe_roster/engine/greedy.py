"""Greedy least-loaded-first shift assignment."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.types import DAYS_ORDER, SHIFTS, Registration, Slot, WeeklyRoster
from cafe_roster.services.constraints import filter_continuity
from cafe_roster.services.scoring import RandomTieBreaker, TieBreaker, rank_candidates

from .base import BaseScheduler


class GreedyScheduler(BaseScheduler):
    """
    Fills cells Mon→Sun, shift 1→3, picking the least-loaded registrants.

    Cells with fewer eligible registrants than capacity stay under-filled.
    """

    name = "greedy"

    def __init__(self, max_per_shift: int = 2, tie_breaker: Optional[TieBreaker] = None):
        if max_per_shift < 1:
            raise ValueError(f"max_per_shift must be positive, got {max_per_shift}")
        self.max_per_shift = max_per_shift
        self.tie_breaker = tie_breaker or RandomTieBreaker()

    def candidates_for(self, registrations: Mapping[str, Registration], slot: Slot) -> List[str]:
        return [name for name, reg in registrations.items() if slot in reg.slots]

    def make_schedule(
        self,
        registrations: Mapping[str, Registration],
        directory: RosterDirectory,
    ) -> WeeklyRoster:
        roster = WeeklyRoster.empty()
        running: Dict[str, int] = {name: 0 for name in directory.names()}

        for day in DAYS_ORDER:
            for shift in SHIFTS:
                candidates = self.candidates_for(registrations, Slot(day, shift))
                eligible = filter_continuity(roster, candidates, day, shift)
                ranked = rank_candidates(eligible, running, self.tie_breaker)
                selected = ranked[: self.max_per_shift]
                roster.assign(day, shift, selected)
                for name in selected:
                    running[name] = running.get(name, 0) + 1
        return roster
