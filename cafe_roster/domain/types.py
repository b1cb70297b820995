"""Value types shared by ingestion, assignment and accounting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Set, Tuple

import pandas as pd


DAYS_ORDER = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
SHIFTS = [1, 2, 3]


@dataclass(frozen=True, order=True)
class Slot:
    """One bookable (day, shift) unit."""

    day: str
    shift: int

    def __post_init__(self):
        if self.day not in DAYS_ORDER:
            raise ValueError(f"Unknown day code {self.day!r}")
        if self.shift not in SHIFTS:
            raise ValueError(f"Unknown shift number {self.shift!r}")

    @property
    def code(self) -> str:
        return f"{self.day}-{self.shift}"

    @classmethod
    def parse(cls, code: str) -> "Slot":
        day, _, shift = code.partition("-")
        return cls(day, int(shift))

    def sort_key(self) -> Tuple[int, int]:
        return DAYS_ORDER.index(self.day), self.shift


def all_slots() -> Iterator[Slot]:
    """Every (day, shift) pair, Mon→Sun and shift 1→3."""
    for day in DAYS_ORDER:
        for shift in SHIFTS:
            yield Slot(day, shift)


@dataclass
class Registration:
    slots: Set[Slot] = field(default_factory=set)
    reason: str = ""

    def ordered_slots(self) -> List[Slot]:
        return sorted(self.slots, key=Slot.sort_key)

    def days(self) -> Set[str]:
        return {slot.day for slot in self.slots}


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str


class WeeklyRoster:
    """
    Day × shift grid of ordered assigned names.

    All 21 cells always exist; an empty list means "generated but unfilled".
    """

    def __init__(self, cells: Dict[str, Dict[int, List[str]]]):
        missing = [f"{day}-{shift}" for day in DAYS_ORDER for shift in SHIFTS if shift not in cells.get(day, {})]
        if missing:
            raise ValueError(f"Roster is missing cells: {', '.join(missing)}")
        self._cells = cells

    @classmethod
    def empty(cls) -> "WeeklyRoster":
        return cls({day: {shift: [] for shift in SHIFTS} for day in DAYS_ORDER})

    def cell(self, day: str, shift: int) -> List[str]:
        return self._cells[day][shift]

    def assign(self, day: str, shift: int, names: Iterable[str]) -> None:
        self._cells[day][shift] = list(names)

    def is_assigned(self, name: str, day: str, shift: int) -> bool:
        return name in self._cells[day][shift]

    def iter_cells(self) -> Iterator[Tuple[str, int, List[str]]]:
        for day in DAYS_ORDER:
            for shift in SHIFTS:
                yield day, shift, self._cells[day][shift]

    def place_count(self) -> int:
        """Filled shift places across all 21 cells."""
        return sum(len(names) for _, _, names in self.iter_cells())

    def shifts_of(self, name: str) -> List[Slot]:
        return [Slot(day, shift) for day, shift, names in self.iter_cells() if name in names]

    def to_dict(self) -> Dict[str, Dict[str, List[str]]]:
        return {
            day: {str(shift): list(self._cells[day][shift]) for shift in SHIFTS}
            for day in DAYS_ORDER
        }

    @classmethod
    def from_dict(cls, data: Dict, max_per_shift: int | None = None) -> "WeeklyRoster":
        """
        Rebuild a roster from its JSON-safe form.

        Raises:
            ValueError: If any of the 21 cells is missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError("Roster must be a mapping of day -> shift -> names")
        cells: Dict[str, Dict[int, List[str]]] = {}
        for day in DAYS_ORDER:
            day_data = data.get(day)
            if not isinstance(day_data, dict):
                raise ValueError(f"Roster is missing day {day}")
            cells[day] = {}
            for shift in SHIFTS:
                names = day_data.get(str(shift), day_data.get(shift))
                if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                    raise ValueError(f"Roster cell {day}-{shift} is missing or malformed")
                if max_per_shift is not None and len(names) > max_per_shift:
                    raise ValueError(f"Roster cell {day}-{shift} exceeds capacity {max_per_shift}")
                cells[day][shift] = list(names)
        return cls(cells)

    def to_frame(self) -> pd.DataFrame:
        """Long form: one row per (day, shift, position, name)."""
        rows = [
            {"day": day, "shift": shift, "position": pos, "name": name}
            for day, shift, names in self.iter_cells()
            for pos, name in enumerate(names)
        ]
        return pd.DataFrame(rows, columns=["day", "shift", "position", "name"])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeeklyRoster):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        filled = sum(1 for _, _, names in self.iter_cells() if names)
        return f"<WeeklyRoster(filled_cells={filled}/21)>"
