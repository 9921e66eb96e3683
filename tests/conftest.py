"""Shared fixtures for plan2gantt tests.

``make_row`` builds one plan row keyed the way a sheet-to-JSON export keys
it (outline column under the project title, other columns ``__EMPTY_n``).
``header_rows`` produces the metadata rows ``convert`` skips, and
``plan_file`` writes both to a JSON file under tmp_path for CLI tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from plan2gantt import log
from plan2gantt.config import DEFAULT_HEADER_ROWS, ColumnMap
from plan2gantt.io_utils import write_text

COLUMNS = ColumnMap()

_FIELD_KEYS = {
    "assignee": COLUMNS.assignee,
    "start": COLUMNS.start,
    "end": COLUMNS.end,
    "duration": COLUMNS.duration,
    "bucket": COLUMNS.bucket,
    "progress": COLUMNS.progress,
    "priority": COLUMNS.priority,
    "dependencies": COLUMNS.dependencies,
    "milestone": COLUMNS.milestone,
    "notes": COLUMNS.notes,
}


def _make_row(outline: Any, name: Any = None, **fields: Any) -> dict[str, Any]:
    row: dict[str, Any] = {COLUMNS.outline: outline}
    row[COLUMNS.name] = f"Task {outline}" if name is None else name
    for field_name, value in fields.items():
        row[_FIELD_KEYS[field_name]] = value
    return row


def _header_rows(count: int = DEFAULT_HEADER_ROWS) -> list[dict[str, Any]]:
    return [{COLUMNS.outline: f"meta {i}"} for i in range(count)]


@pytest.fixture(autouse=True)
def _reset_log():
    """Keep verbosity and console routing from leaking between tests."""
    yield
    log.set_verbose(False)
    log.use_stderr(False)


@pytest.fixture
def make_row():
    """Factory fixture that creates raw sheet rows keyed like a sheet export."""
    return _make_row


@pytest.fixture
def header_rows():
    """Factory fixture for the metadata rows that precede the plan."""
    return _header_rows


@pytest.fixture
def plan_file(tmp_path: Path):
    """Write records (header rows included) to a JSON file and return its path."""

    def _write(rows: list[dict[str, Any]], name: str = "plan.json") -> Path:
        path = tmp_path / name
        write_text(path, json.dumps(_header_rows() + rows))
        return path

    return _write
