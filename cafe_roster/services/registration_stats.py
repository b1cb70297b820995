"""Registration overview per employee (who registered, who is short on days)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping

from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.types import Registration, Slot


REGISTERED = "registered"
NOT_REGISTERED = "not-registered"

NOT_SUBMITTED_REASON = "Has not submitted the form"
MISSING_REASON = "No reason given"


@dataclass
class StaffRegistration:
    employee_id: str
    name: str
    status: str
    day_count: int = 0
    slot_count: int = 0
    slots: List[Slot] = field(default_factory=list)
    reason: str = ""
    is_low_registration: bool = False


@dataclass
class RegistrationSummary:
    total_staff: int
    registered_count: int
    staff: List[StaffRegistration]


def _sort_key(entry: StaffRegistration):
    return (0 if entry.is_low_registration else 1, 0 if entry.status == REGISTERED else 1)


def registration_summary(
    registrations: Mapping[str, Registration],
    directory: RosterDirectory,
    low_registration_days: int = 4,
) -> RegistrationSummary:
    """
    Summarize registrations against the directory.

    Low-registration staff come first, then registered before unregistered;
    directory order is kept otherwise.
    """
    staff: List[StaffRegistration] = []
    for emp in directory:
        reg = registrations.get(emp.name)
        if reg is None:
            staff.append(
                StaffRegistration(emp.employee_id, emp.name, NOT_REGISTERED, reason=NOT_SUBMITTED_REASON)
            )
            continue
        day_count = len(reg.days())
        is_low = day_count < low_registration_days
        staff.append(
            StaffRegistration(
                employee_id=emp.employee_id,
                name=emp.name,
                status=REGISTERED,
                day_count=day_count,
                slot_count=len(reg.slots),
                slots=reg.ordered_slots(),
                reason=reg.reason or (MISSING_REASON if is_low else ""),
                is_low_registration=is_low,
            )
        )
    staff.sort(key=_sort_key)
    return RegistrationSummary(
        total_staff=len(directory),
        registered_count=len(registrations),
        staff=staff,
    )
