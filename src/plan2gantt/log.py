"""Console logging with colored output via Rich."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

_out_console = Console(highlight=False, soft_wrap=True)
_err_console = Console(highlight=False, soft_wrap=True, stderr=True)
console = _out_console

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def use_stderr(enabled: bool) -> None:
    """Send regular output to stderr, keeping stdout free for the JSON document."""
    global console
    console = _err_console if enabled else _out_console


def info(msg: str) -> None:
    console.print(f"[blue]\\[INFO][/blue] {escape(msg)}")


def success(msg: str) -> None:
    console.print(f"[green]\\[OK][/green] {escape(msg)}")


def warn(msg: str) -> None:
    console.print(f"[yellow]\\[WARN][/yellow] {escape(msg)}")


def error(msg: str) -> None:
    _err_console.print(f"[red]\\[ERROR][/red] {escape(msg)}")


def debug(msg: str) -> None:
    if _verbose:
        console.print(f"[dim]\\[DEBUG] {escape(msg)}[/dim]")


def summary(stats: Any) -> None:
    """Print a conversion summary table."""
    table = Table(title="Conversion summary", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Rows read", str(stats.rows_read))
    table.add_row("Tasks", str(stats.tasks))
    table.add_row("Rows skipped", str(stats.skipped_rows))
    table.add_row("Orphaned tasks", str(stats.orphans))
    table.add_row("Dependency references", str(stats.references))
    table.add_row("Dependencies", str(stats.edges))
    console.print(table)
