"""Dependency codes: parse ``1FS,2.1SS`` text and map type codes to Gantt types."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Any

from plan2gantt.tasks.model import DependencyRef

_DEPENDENCY_RE = re.compile(r"^([\d.]+)([A-Z]{2})$")


class DependencyType(IntEnum):
    """Gantt dependency type values."""

    START_TO_START = 0
    START_TO_FINISH = 1
    FINISH_TO_START = 2
    FINISH_TO_FINISH = 3


TYPE_CODES: dict[str, DependencyType] = {
    "FS": DependencyType.FINISH_TO_START,
    "SS": DependencyType.START_TO_START,
    "FF": DependencyType.FINISH_TO_FINISH,
    "SF": DependencyType.START_TO_FINISH,
}


def parse_dependency_text(text: Any) -> list[DependencyRef]:
    """Parse comma-separated dependency codes such as ``"3FF, 4.2SF"``.

    Each segment is an outline number followed by exactly two uppercase
    letters. Segments of any other shape are dropped.
    """
    if text is None or text == "":
        return []

    refs: list[DependencyRef] = []
    for segment in str(text).split(","):
        segment = segment.strip()
        if not segment:
            continue
        match = _DEPENDENCY_RE.match(segment)
        if match:
            refs.append(DependencyRef(outline_number=match.group(1), type_code=match.group(2)))
    return refs


def map_type_code(code: str) -> DependencyType:
    """Return the Gantt type for a two-letter code, Finish-to-Start if unknown."""
    return TYPE_CODES.get(code, DependencyType.FINISH_TO_START)
