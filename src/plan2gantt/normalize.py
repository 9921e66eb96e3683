"""Field normalization: serial dates, duration text, progress and flags."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Mapping

from plan2gantt.config import ColumnMap

# Serial 60 is the nonexistent 1900-02-29 kept by spreadsheet software,
# so dates from 1900-03-01 on count from one day earlier.
_EARLY_EPOCH = date(1899, 12, 31)
_EPOCH = date(1899, 12, 30)
_PHANTOM_LEAP_SERIAL = 60

_DURATION_RE = re.compile(r"(\d+)\s*(day|days)", re.IGNORECASE)

MILESTONE_VALUES: frozenset[str] = frozenset({"yes", "y", "true", "1", "x"})


@dataclass(frozen=True)
class NormalizedRow:
    outline_number: str
    name: str
    assignee: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    duration: int = 0
    bucket: Any = None
    percent_done: float = 0
    priority: Any = None
    dependency_text: Any = None
    milestone: bool = False
    notes: str | None = None


def date_from_serial(serial: float) -> date:
    """Convert a spreadsheet serial day number to a calendar date.

    Serial 1 is 1900-01-01. Any fractional time-of-day part is dropped.
    """
    days = math.floor(serial)
    if days < _PHANTOM_LEAP_SERIAL:
        return _EARLY_EPOCH + timedelta(days=days)
    if days == _PHANTOM_LEAP_SERIAL:
        return date(1900, 2, 28)
    return _EPOCH + timedelta(days=days)


def duration_from_text(text: Any) -> int:
    """Return N from text like ``"3 days"``; 0 when there is no match."""
    if not text or not isinstance(text, str):
        return 0
    match = _DURATION_RE.search(text)
    return int(match.group(1)) if match else 0


def duration_from_dates(start: date, end: date) -> int:
    """Days to add to *start* to reach *end*. Negative if *end* is earlier."""
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    return (end - start).days


def percent_from_fraction(fraction: Any) -> float:
    if isinstance(fraction, str):
        try:
            fraction = float(fraction) if fraction.strip() else 0
        except ValueError:
            return 0
    if not fraction or isinstance(fraction, bool) or not isinstance(fraction, (int, float)):
        return 0
    if not math.isfinite(fraction):
        return 0
    return fraction * 100


def coerce_date(value: Any) -> date | None:
    """Best-effort date from a serial number, date object or ISO string.

    Empty cells and serial 0 count as absent.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        if not value or math.isnan(value):
            return None
        try:
            return date_from_serial(value)
        except (OverflowError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            serial = float(text)
        except ValueError:
            try:
                return date.fromisoformat(text[:10])
            except ValueError:
                return None
        return coerce_date(serial)
    return None


def outline_key(value: Any) -> str:
    """Canonical outline-number string (``2.0`` -> ``"2"``)."""
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_milestone(value: Any) -> bool:
    if value is True:
        return True
    if isinstance(value, str):
        return value.strip().lower() in MILESTONE_VALUES
    return False


def optional_text(value: Any) -> Any:
    """Return *value* unless it is an empty cell or an unchecked (False) flag."""
    if isinstance(value, str):
        value = value.strip()
    if value is None or value is False or value == "":
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def normalize_row(row: Mapping[str, Any], columns: ColumnMap) -> NormalizedRow:
    """Apply every field conversion to one raw record."""
    start = coerce_date(row.get(columns.start))
    end = coerce_date(row.get(columns.end))
    if start is not None and end is not None:
        duration = duration_from_dates(start, end)
    else:
        duration = duration_from_text(row.get(columns.duration))

    name = optional_text(row.get(columns.name))
    return NormalizedRow(
        outline_number=outline_key(row.get(columns.outline)),
        name=str(name) if name is not None else "",
        assignee=optional_text(row.get(columns.assignee)),
        start_date=start,
        end_date=end,
        duration=duration,
        bucket=optional_text(row.get(columns.bucket)),
        percent_done=percent_from_fraction(row.get(columns.progress)),
        priority=optional_text(row.get(columns.priority)),
        dependency_text=optional_text(row.get(columns.dependencies)),
        milestone=is_milestone(row.get(columns.milestone)),
        notes=optional_text(row.get(columns.notes)),
    )
