"""Configuration defaults, env vars, and column mapping for plan2gantt."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from typing import Mapping


DEFAULT_PROJECT_NAME = "Launch website"

# Leading title/metadata rows in a project sheet export.
DEFAULT_HEADER_ROWS = 8

DEFAULT_OUTPUT = "data.json"


@dataclass(frozen=True)
class ColumnMap:
    """Record keys for each consumed column.

    Sheet-to-JSON exports key unnamed header cells as ``__EMPTY``,
    ``__EMPTY_1`` and so on; the outline-number column is keyed by the
    sheet title, which is the project name.
    """

    outline: str = DEFAULT_PROJECT_NAME
    name: str = "__EMPTY"
    assignee: str = "__EMPTY_1"
    start: str = "__EMPTY_2"
    end: str = "__EMPTY_3"
    duration: str = "__EMPTY_4"
    bucket: str = "__EMPTY_5"
    progress: str = "__EMPTY_6"
    priority: str = "__EMPTY_7"
    dependencies: str = "__EMPTY_8"
    milestone: str = "__EMPTY_13"
    notes: str = "__EMPTY_14"

    def with_overrides(self, overrides: Mapping[str, str]) -> ColumnMap:
        """Return a copy with some column keys replaced.

        Raises ``ValueError`` for a field name that is not a column.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(
                f"Unknown column field(s): {', '.join(unknown)}. "
                f"Valid fields: {', '.join(sorted(known))}."
            )
        return replace(self, **dict(overrides))


@dataclass
class Config:
    """Runtime configuration: mirrors the CLI flags."""

    project_name: str = ""
    header_rows: int = DEFAULT_HEADER_ROWS
    columns: ColumnMap | None = None
    column_overrides: dict[str, str] = field(default_factory=dict)

    # Output
    output: str = DEFAULT_OUTPUT
    indent: int = 2

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.project_name:
            self.project_name = os.environ.get("PLAN2GANTT_PROJECT_NAME") or DEFAULT_PROJECT_NAME
        if self.header_rows < 0:
            raise ValueError("header_rows cannot be negative")
        if self.columns is None:
            self.columns = ColumnMap(outline=self.project_name)
        if self.column_overrides:
            self.columns = self.columns.with_overrides(self.column_overrides)
