"""Employee universe: default staff plus names discovered during ingestion."""

from __future__ import annotations

import re
import unicodedata
from typing import Dict, Iterable, Iterator, List, Optional

from cafe_roster.domain.types import Employee


_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """
    Directory key for a display name.

    Unicode is NFC-composed and whitespace runs collapse to one space; case is
    kept, so keys must otherwise match exactly.
    """
    return _WHITESPACE.sub(" ", unicodedata.normalize("NFC", name)).strip()


def synthesize_id(name: str) -> str:
    return f"NEW_{normalize_name(name)}"


class RosterDirectory:
    """Ordered employee list keyed by normalized name."""

    def __init__(self, employees: Iterable[Employee] = ()):
        self._employees: List[Employee] = []
        self._by_key: Dict[str, Employee] = {}
        for employee in employees:
            self._add(employee)

    @classmethod
    def from_config(cls, cfg) -> "RosterDirectory":
        return cls(Employee(employee_id=e["id"], name=e["name"]) for e in cfg.default_employees)

    def _add(self, employee: Employee) -> bool:
        key = normalize_name(employee.name)
        if key in self._by_key:
            return False
        if employee.name != key:
            employee = Employee(employee_id=employee.employee_id, name=key)
        self._employees.append(employee)
        self._by_key[key] = employee
        return True

    def extend(self, names: Iterable[str]) -> List[Employee]:
        """
        Append names not yet present, in first-seen order.

        Returns:
            The newly created employees
        """
        added: List[Employee] = []
        for name in names:
            key = normalize_name(name)
            if not key or key in self._by_key:
                continue
            employee = Employee(employee_id=synthesize_id(key), name=key)
            self._add(employee)
            added.append(employee)
        return added

    def get(self, name: str) -> Optional[Employee]:
        return self._by_key.get(normalize_name(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._by_key

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))

    def __len__(self) -> int:
        return len(self._employees)

    def names(self) -> List[str]:
        return [e.name for e in self._employees]

    def copy(self) -> "RosterDirectory":
        return RosterDirectory(self._employees)
