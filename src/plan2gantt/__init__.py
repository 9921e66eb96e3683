"""plan2gantt: outline-numbered project plans to Gantt load responses."""

__version__ = "1.0.0"
