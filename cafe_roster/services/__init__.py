"""Services for scheduling rules and reporting."""

from .constraints import filter_continuity, is_broken_shift, validate_roster
from .scoring import RandomTieBreaker, StableTieBreaker, TieBreaker, rank_candidates
from .load import LoadEntry, cumulative_load
from .registration_stats import registration_summary

__all__ = [
    "filter_continuity",
    "is_broken_shift",
    "validate_roster",
    "RandomTieBreaker",
    "StableTieBreaker",
    "TieBreaker",
    "rank_candidates",
    "LoadEntry",
    "cumulative_load",
    "registration_summary",
]
