"""Map registration-sheet rows to per-employee availability."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from cafe_roster.directory import normalize_name
from cafe_roster.domain.types import DAYS_ORDER, Registration, Slot


NAME_KEYWORDS = ["tên", "name"]
REASON_KEYWORDS = ["lý do", "reason", "note"]
SHIFT_LIST_KEYWORDS = ["ca", "lịch", "đăng ký", "shift", "schedule", "registration"]

DAY_KEYWORDS: Dict[str, List[str]] = {
    "Mon": ["thứ 2", "t2", "mon"],
    "Tue": ["thứ 3", "t3", "tue"],
    "Wed": ["thứ 4", "t4", "wed"],
    "Thu": ["thứ 5", "t5", "thu"],
    "Fri": ["thứ 6", "t6", "fri"],
    "Sat": ["thứ 7", "t7", "sat"],
    "Sun": ["chủ nhật", "cn", "sun"],
}

SHIFT_KEYWORDS: Dict[int, List[str]] = {
    1: ["ca 1", "shift 1", "sáng", "morning"],
    2: ["ca 2", "shift 2", "chiều", "afternoon"],
    3: ["ca 3", "shift 3", "tối", "evening"],
}

_DESCRIPTOR_SPLIT = re.compile(r"[,;\n]")


@dataclass
class NormalizedSheet:
    """Employees in first-seen order plus their merged registrations."""

    names: List[str] = field(default_factory=list)
    registrations: Dict[str, Registration] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.registrations)


@dataclass
class HeaderLayout:
    name_idx: int
    reason_idx: Optional[int]
    day_columns: Dict[str, int]
    shift_list_idx: Optional[int]


def _fold(text: str) -> str:
    return unicodedata.normalize("NFC", text).lower().strip()


def _find_column(headers: pd.Series, keywords: Sequence[str], exclude: Sequence[int] = ()) -> Optional[int]:
    hits = pd.Series(False, index=headers.index)
    for keyword in keywords:
        hits |= headers.str.contains(keyword, regex=False)
    hits &= ~headers.index.isin(list(exclude))
    matches = headers.index[hits.to_numpy()]
    return int(matches[0]) if len(matches) else None


def detect_layout(header_row: Sequence[str]) -> Optional[HeaderLayout]:
    """
    Locate the name, reason, per-day and shift-list columns.

    Returns:
        HeaderLayout, or None when no name column exists
    """
    headers = pd.Series([_fold(h) for h in header_row], dtype=object)
    name_idx = _find_column(headers, NAME_KEYWORDS)
    if name_idx is None:
        return None
    reason_idx = _find_column(headers, REASON_KEYWORDS)

    day_columns: Dict[str, int] = {}
    for day, keywords in DAY_KEYWORDS.items():
        idx = _find_column(headers, keywords)
        if idx is not None:
            day_columns[day] = idx

    shift_list_idx = None
    if not day_columns:
        claimed = [i for i in (name_idx, reason_idx) if i is not None]
        shift_list_idx = _find_column(headers, SHIFT_LIST_KEYWORDS, exclude=claimed)

    return HeaderLayout(name_idx, reason_idx, day_columns, shift_list_idx)


def shifts_in_cell(cell: str) -> List[int]:
    """Every shift mentioned in a per-day cell (zero to three)."""
    text = _fold(cell)
    return [shift for shift, keywords in SHIFT_KEYWORDS.items() if any(k in text for k in keywords)]


def parse_slot_descriptor(descriptor: str) -> Optional[Slot]:
    """Read one free-text entry such as ``"Thứ 2 - Ca 1"``; None if day or shift is missing."""
    text = _fold(descriptor)
    day = next((d for d in DAYS_ORDER if any(k in text for k in DAY_KEYWORDS[d])), None)
    shift = next((s for s, keywords in SHIFT_KEYWORDS.items() if any(k in text for k in keywords)), None)
    if day is None or shift is None:
        return None
    return Slot(day, shift)


def _descriptor_slots(cell: str) -> List[Slot]:
    parts = filter(None, (p.strip() for p in _DESCRIPTOR_SPLIT.split(cell)))
    return [slot for slot in map(parse_slot_descriptor, parts) if slot is not None]


def _slot_series(body: pd.DataFrame, layout: HeaderLayout) -> pd.Series:
    """Claimed slots per sheet row, aligned with ``body``."""
    if layout.day_columns:
        per_day = {day: body[idx].map(shifts_in_cell) for day, idx in layout.day_columns.items()}
        return body.index.to_series().map(
            lambda i: [Slot(day, shift) for day, cells in per_day.items() for shift in cells[i]]
        )
    if layout.shift_list_idx is not None:
        return body[layout.shift_list_idx].map(_descriptor_slots)
    return body.index.to_series().map(lambda i: [])


def merge_registration(existing: Registration, slots, reason: str, separator: str = " | ") -> Registration:
    """Union the slots; append a reason unless it is already contained."""
    merged_reason = existing.reason
    if reason and reason not in existing.reason:
        merged_reason = f"{existing.reason}{separator}{reason}" if existing.reason else reason
    return Registration(slots=existing.slots | set(slots), reason=merged_reason)


def normalize_rows(rows: Sequence[Sequence[str]], separator: str = " | ") -> NormalizedSheet:
    """
    Turn parsed sheet rows (row 0 is the header) into merged registrations.

    Rows without a name and unreadable slot text are skipped. A sheet with no
    name column or no data rows gives an empty result.

    Args:
        rows: Output of ``parse_table``
        separator: Joins reasons of duplicate rows

    Returns:
        NormalizedSheet keyed by normalized employee name
    """
    result = NormalizedSheet()
    if len(rows) < 2:
        return result
    layout = detect_layout(rows[0])
    if layout is None:
        return result

    width = max(len(rows[0]), max(len(r) for r in rows[1:]))
    body = pd.DataFrame([list(r) for r in rows[1:]], dtype=object)
    body = body.reindex(columns=range(width)).fillna("").astype(str)

    names = body[layout.name_idx].map(normalize_name)
    if layout.reason_idx is not None:
        reasons = body[layout.reason_idx].str.strip()
    else:
        reasons = pd.Series("", index=body.index)
    slots = _slot_series(body, layout)
    named = names != ""

    for name, reason, row_slots in zip(names[named], reasons[named], slots[named]):
        existing = result.registrations.get(name)
        if existing is None:
            result.registrations[name] = Registration(slots=set(row_slots), reason=reason)
            result.names.append(name)
        else:
            result.registrations[name] = merge_registration(existing, row_slots, reason, separator)
    return result
