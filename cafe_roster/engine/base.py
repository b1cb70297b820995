"""Base scheduler interface for weekly roster builders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.types import Registration, WeeklyRoster


class BaseScheduler(ABC):
    """
    Abstract base class for roster builders.

    A scheduler turns availability into a complete day × shift grid. It never
    touches persisted history; lock checks happen in the orchestrator.
    """

    name: str = "base"

    @abstractmethod
    def make_schedule(
        self,
        registrations: Mapping[str, Registration],
        directory: RosterDirectory,
    ) -> WeeklyRoster:
        """
        Build the roster for one week.

        Args:
            registrations: Availability keyed by employee name
            directory: Employee universe (seeds the running counts)

        Returns:
            WeeklyRoster with all 21 cells present
        """
        pass
