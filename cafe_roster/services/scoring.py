"""Fairness ranking of shift candidates."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence


class TieBreaker(ABC):
    """Decides the order of candidates that carry the same running count."""

    @abstractmethod
    def prepare(self, candidates: Sequence[str]) -> List[str]:
        """Return the candidates in the order used before the stable count sort."""
        pass


class StableTieBreaker(TieBreaker):
    """Keeps registration order among equally loaded candidates."""

    def prepare(self, candidates: Sequence[str]) -> List[str]:
        return list(candidates)


class RandomTieBreaker(TieBreaker):
    """
    Shuffles equally loaded candidates.

    A seed pins the sequence so a run can be reproduced.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def prepare(self, candidates: Sequence[str]) -> List[str]:
        shuffled = list(candidates)
        self._rng.shuffle(shuffled)
        return shuffled


def rank_candidates(
    candidates: Sequence[str],
    running_counts: Dict[str, int],
    tie_breaker: TieBreaker,
) -> List[str]:
    """
    Order candidates by ascending running shift count.

    Args:
        candidates: Eligible names for one cell
        running_counts: Shifts assigned so far this week {name: count}
        tie_breaker: Orders names whose counts are equal

    Returns:
        Candidates, least loaded first
    """
    prepared = tie_breaker.prepare(candidates)
    return sorted(prepared, key=lambda name: running_counts.get(name, 0))
