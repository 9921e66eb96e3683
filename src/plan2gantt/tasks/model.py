"""Task, dependency and edge data models shared by the builder and resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any


@dataclass
class GanttTask:
    id: int
    name: str
    start_date: date | None = None
    duration: int = 0
    resource_assignment: str | None = None
    percent_done: float = 0
    expanded: bool = False
    note: str | None = None
    bucket: Any = None
    priority: Any = None
    children: list[GanttTask] = field(default_factory=list)

    def to_row(self) -> dict[str, Any]:
        """Render the task (and its subtree) with the Gantt wire field names.

        Unset optional fields are left out rather than written as null.
        """
        row: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.start_date is not None:
            row["startDate"] = self.start_date.isoformat()
        row["duration"] = self.duration
        if self.resource_assignment is not None:
            row["resourceAssignment"] = self.resource_assignment
        row["percentDone"] = self.percent_done
        if self.expanded:
            row["expanded"] = True
        if self.note is not None:
            row["note"] = self.note
        if self.bucket is not None:
            row["bucket"] = self.bucket
        if self.priority is not None:
            row["priority"] = self.priority
        row["children"] = [child.to_row() for child in self.children]
        return row


@dataclass(frozen=True)
class DependencyRef:
    outline_number: str
    type_code: str


@dataclass(frozen=True)
class RawDependencyEntry:
    task_id: int
    outline_number: str
    refs: tuple[DependencyRef, ...] = ()


@dataclass(frozen=True)
class DependencyEdge:
    id: int
    from_task: int
    to_task: int
    type: int

    def to_row(self) -> dict[str, int]:
        return {
            "id": self.id,
            "fromTask": self.from_task,
            "toTask": self.to_task,
            "type": int(self.type),
        }
