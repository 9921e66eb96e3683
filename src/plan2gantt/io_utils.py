"""UTF-8 file helpers: plan records in, load-response JSON out."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from plan2gantt.errors import PlanInputError, PlanOutputError

PathLike = Path | str

STDIO = "-"


def read_text(path: PathLike) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: PathLike, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")


def read_records(path: PathLike) -> list[dict[str, Any]]:
    """Load a JSON array of row objects; ``-`` reads stdin.

    Raises ``PlanInputError`` when the file is unreadable, is not JSON, or is
    not a list of objects.
    """
    try:
        text = sys.stdin.read() if str(path) == STDIO else read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise PlanInputError(f"Cannot read {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PlanInputError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise PlanInputError(f"{path} must contain a JSON array of row objects")
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            raise PlanInputError(
                f"{path}: record {position} is {type(record).__name__}, expected an object"
            )
    return data


def write_document(path: PathLike, document: dict[str, Any], indent: int | None = 2) -> None:
    """Serialize *document* as strict JSON to *path*; ``-`` writes stdout.

    NaN and Infinity have no JSON spelling and raise ``PlanOutputError``.
    """
    try:
        text = json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        raise PlanOutputError(f"Cannot serialize load response: {exc}") from exc
    if str(path) == STDIO:
        sys.stdout.write(text + "\n")
        return
    try:
        write_text(path, text)
    except OSError as exc:
        raise PlanOutputError(f"Cannot write {path}: {exc}") from exc
