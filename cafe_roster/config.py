"""Configuration loading (YAML or JSON) for the café roster."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml


DEFAULT_EMPLOYEES = [
    {"id": "NV001", "name": "Bùi Đức Huy"},
    {"id": "NV002", "name": "Tạ Lê Uyên"},
    {"id": "NV003", "name": "Cung Hồng Ngân Hà"},
    {"id": "NV004", "name": "Nguyễn Phương Thảo"},
    {"id": "NV005", "name": "Trần Vũ Phương Oanh"},
    {"id": "NV006", "name": "Nguyễn Minh Nguyệt"},
    {"id": "NV007", "name": "Đinh Diệu An"},
    {"id": "NV008", "name": "Nguyễn Văn Toàn"},
]


@dataclass
class ShiftWindow:
    start: str
    end: str

    def label(self) -> str:
        return f"{self.start} - {self.end}"


def _default_shift_times() -> Dict[int, ShiftWindow]:
    return {
        1: ShiftWindow("07:00", "12:30"),
        2: ShiftWindow("12:30", "17:30"),
        3: ShiftWindow("17:30", "22:30"),
    }


@dataclass
class RosterConfig:
    max_per_shift: int = 2
    shift_times: Dict[int, ShiftWindow] = field(default_factory=_default_shift_times)
    default_employees: List[Dict[str, str]] = field(default_factory=lambda: [dict(e) for e in DEFAULT_EMPLOYEES])
    sheet_url: Optional[str] = None
    db_url: str = "sqlite:///roster.db"
    fetch_timeout: float = 30.0
    tie_break_seed: Optional[int] = None
    low_registration_days: int = 4
    reason_separator: str = " | "


def _parse_shift_times(raw: Dict) -> Dict[int, ShiftWindow]:
    times = _default_shift_times()
    for key, window in raw.items():
        shift = int(key)
        if shift not in times:
            raise ValueError(f"shift_times: unknown shift number {key!r} (expected 1, 2 or 3)")
        times[shift] = ShiftWindow(start=str(window["start"]), end=str(window["end"]))
    return times


def load_config(path: str | Path | None = None) -> RosterConfig:
    """
    Load configuration from a YAML or JSON file.

    Args:
        path: Config file path; ``None`` returns the built-in defaults

    Returns:
        RosterConfig with defaults filled in for missing keys

    Raises:
        ValueError: If a value is out of range
    """
    if path is None:
        return RosterConfig()

    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        raw = json.loads(text) or {}
    else:
        raw = yaml.safe_load(text) or {}

    cfg = RosterConfig()
    if "max_per_shift" in raw:
        cfg.max_per_shift = int(raw["max_per_shift"])
        if cfg.max_per_shift < 1:
            raise ValueError(f"max_per_shift must be positive, got {cfg.max_per_shift}")
    if "shift_times" in raw:
        cfg.shift_times = _parse_shift_times(raw["shift_times"] or {})
    if "default_employees" in raw:
        cfg.default_employees = [
            {"id": str(e["id"]), "name": str(e["name"])} for e in raw["default_employees"] or []
        ]
    if raw.get("sheet_url"):
        cfg.sheet_url = str(raw["sheet_url"])
    if raw.get("db_url"):
        cfg.db_url = str(raw["db_url"])
    if "fetch_timeout" in raw:
        cfg.fetch_timeout = float(raw["fetch_timeout"])
    if raw.get("tie_break_seed") is not None:
        cfg.tie_break_seed = int(raw["tie_break_seed"])
    if "low_registration_days" in raw:
        cfg.low_registration_days = int(raw["low_registration_days"])
    if "reason_separator" in raw:
        cfg.reason_separator = str(raw["reason_separator"])
    return cfg
