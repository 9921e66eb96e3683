"""Exceptions raised around the conversion core (reading and writing files)."""

from __future__ import annotations


class Plan2GanttError(Exception):
    """Base class for fatal plan2gantt errors."""


class PlanInputError(Plan2GanttError):
    """Raised when the input records cannot be read or have the wrong shape."""


class PlanOutputError(Plan2GanttError):
    """Raised when the load response cannot be written."""
