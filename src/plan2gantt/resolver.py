"""Resolve staged dependency references into edges between task ids."""

from __future__ import annotations

from typing import Iterable, Mapping

from plan2gantt import log
from plan2gantt.dependencies import map_type_code
from plan2gantt.tasks.model import DependencyEdge, GanttTask, RawDependencyEntry


def resolve_dependencies(
    staged: Iterable[RawDependencyEntry],
    index: Mapping[str, GanttTask],
) -> list[DependencyEdge]:
    """Return one edge per reference whose two outline numbers both exist.

    Edge ids start at 0 and follow staging order, then reference order.
    References to unknown outline numbers are dropped.
    """
    edges: list[DependencyEdge] = []
    for entry in staged:
        successor = index.get(entry.outline_number)
        for ref in entry.refs:
            predecessor = index.get(ref.outline_number)
            if predecessor is None or successor is None:
                log.debug(
                    f"Dropping dependency {ref.outline_number}{ref.type_code} "
                    f"of task {entry.task_id} ({entry.outline_number}): unknown outline number"
                )
                continue
            edges.append(
                DependencyEdge(
                    id=len(edges),
                    from_task=predecessor.id,
                    to_task=successor.id,
                    type=map_type_code(ref.type_code),
                )
            )
    return edges
