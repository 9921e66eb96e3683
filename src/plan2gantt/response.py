"""Gantt load-response assembly and the end-to-end ``convert`` pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterable, Mapping, Sequence

from plan2gantt.config import Config
from plan2gantt.outline import build_outline
from plan2gantt.resolver import resolve_dependencies
from plan2gantt.tasks.model import DependencyEdge, GanttTask


@dataclass(frozen=True)
class ConversionStats:
    rows_read: int = 0
    tasks: int = 0
    skipped_rows: int = 0
    orphans: int = 0
    references: int = 0
    edges: int = 0


@dataclass(frozen=True)
class ConversionResult:
    document: dict[str, Any]
    stats: ConversionStats


def assemble(roots: Iterable[GanttTask], edges: Iterable[DependencyEdge]) -> dict[str, Any]:
    """Package the task tree and dependency edges as a Gantt load response."""
    return {
        "success": True,
        "tasks": {"rows": [task.to_row() for task in roots]},
        "dependencies": {"rows": [edge.to_row() for edge in edges]},
    }


def convert(records: Sequence[Mapping[str, Any]], config: Config | None = None) -> ConversionResult:
    """Convert exported plan records to a load response.

    The first ``config.header_rows`` records are sheet metadata and are
    ignored. The document reports success even when rows or references were
    dropped; the stats say how many.
    """
    cfg = config or Config()
    rows = list(islice(records, cfg.header_rows, None))

    outline = build_outline(rows, cfg.columns)
    edges = resolve_dependencies(outline.staged, outline.index)

    stats = ConversionStats(
        rows_read=len(rows),
        tasks=outline.task_count,
        skipped_rows=outline.skipped_rows,
        orphans=len(outline.orphans),
        references=sum(len(entry.refs) for entry in outline.staged),
        edges=len(edges),
    )
    return ConversionResult(document=assemble(outline.roots, edges), stats=stats)
