"""Outline tree builder: rows -> task hierarchy plus staged dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from plan2gantt import log
from plan2gantt.config import ColumnMap
from plan2gantt.dependencies import parse_dependency_text
from plan2gantt.normalize import normalize_row
from plan2gantt.tasks.model import GanttTask, RawDependencyEntry

OUTLINE_SEPARATOR = "."


@dataclass(frozen=True)
class OutlineResult:
    roots: tuple[GanttTask, ...]
    index: Mapping[str, GanttTask]
    staged: tuple[RawDependencyEntry, ...]
    task_count: int = 0
    skipped_rows: int = 0
    orphans: tuple[str, ...] = ()


def is_root_outline(outline_number: str) -> bool:
    return OUTLINE_SEPARATOR not in outline_number


def parent_outline(outline_number: str) -> str:
    """Outline number of the root a child hangs under (``"2.1.3"`` -> ``"2"``)."""
    return outline_number.split(OUTLINE_SEPARATOR, 1)[0]


def build_outline(rows: Iterable[Mapping[str, Any]], columns: ColumnMap) -> OutlineResult:
    """Build the task tree from rows in plan order.

    Rows must list a parent before any of its children. A child whose parent
    has not been seen yet still receives an id but is left out of the tree.
    Rows without a name or outline number are skipped and take no id.

    Dependency codes are only parsed here; they are resolved once the whole
    index exists, since a task may depend on one further down the plan.
    """
    roots: list[GanttTask] = []
    index: dict[str, GanttTask] = {}
    staged: list[RawDependencyEntry] = []
    orphans: list[str] = []
    skipped = 0
    next_id = 0

    for row in rows:
        fields = normalize_row(row, columns)
        if not fields.name or not fields.outline_number:
            skipped += 1
            continue

        root = is_root_outline(fields.outline_number)
        task = GanttTask(
            id=next_id,
            name=fields.name,
            start_date=fields.start_date,
            duration=0 if fields.milestone else fields.duration,
            resource_assignment=fields.assignee,
            percent_done=fields.percent_done,
            expanded=root,
            note=fields.notes,
            bucket=fields.bucket,
            priority=fields.priority,
        )

        if root:
            roots.append(task)
        else:
            parent = index.get(parent_outline(fields.outline_number))
            if parent is not None:
                parent.children.append(task)
            else:
                orphans.append(fields.outline_number)
                log.debug(
                    f"Task {task.id} ({fields.outline_number}) has no parent row yet; left out of the tree"
                )

        refs = parse_dependency_text(fields.dependency_text)
        if refs:
            staged.append(
                RawDependencyEntry(
                    task_id=task.id,
                    outline_number=fields.outline_number,
                    refs=tuple(refs),
                )
            )

        # Registered after the parent lookup so a task is never its own parent.
        index[fields.outline_number] = task
        next_id += 1

    return OutlineResult(
        roots=tuple(roots),
        index=MappingProxyType(index),
        staged=tuple(staged),
        task_count=next_id,
        skipped_rows=skipped,
        orphans=tuple(orphans),
    )
