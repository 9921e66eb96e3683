"""plan2gantt CLI: convert an exported project plan to a Gantt load response.

Installed as ``plan2gantt`` console_script via pipx / pip.
"""

from __future__ import annotations

import sys

import click

from plan2gantt import __version__
from plan2gantt.config import DEFAULT_HEADER_ROWS, DEFAULT_OUTPUT, Config
from plan2gantt.errors import Plan2GanttError
from plan2gantt.io_utils import STDIO, read_records, write_document


CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _parse_column_options(values: tuple[str, ...]) -> dict[str, str]:
    """Turn ``FIELD=KEY`` pairs into a column override mapping."""
    overrides: dict[str, str] = {}
    for raw in values:
        field_name, sep, key = raw.partition("=")
        field_name = field_name.strip()
        if not sep or not field_name or not key:
            raise click.BadParameter(
                f"Expected FIELD=KEY, got {raw!r} (example: --column name=Task).",
                param_hint="--column",
            )
        overrides[field_name] = key
    return overrides


def _build_config(
    project_name: str,
    header_rows: int,
    columns: tuple[str, ...],
    output: str,
    indent: int,
    verbose: bool,
) -> Config:
    try:
        return Config(
            project_name=project_name,
            header_rows=header_rows,
            column_overrides=_parse_column_options(columns),
            output=output,
            indent=indent,
            verbose=verbose,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("input_path", metavar="INPUT")
@click.option("--output", "-o", default=DEFAULT_OUTPUT, show_default=True, help="Output JSON file ('-' for stdout)")
@click.option("--project-name", default="", help="Sheet title keying the outline-number column")
@click.option("--header-rows", type=int, default=DEFAULT_HEADER_ROWS, show_default=True, help="Leading metadata rows to skip")
@click.option("--column", "columns", multiple=True, metavar="FIELD=KEY", help="Override a column key (repeatable)")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="plan2gantt")
def main(
    input_path: str,
    output: str,
    project_name: str,
    header_rows: int,
    columns: tuple[str, ...],
    indent: int,
    verbose: bool,
) -> None:
    """PLAN2GANTT: Project plan to Gantt load response.

    Reads the rows of an exported project sheet (a JSON array of row
    objects, '-' for stdin), rebuilds the task tree from outline numbers,
    resolves dependency codes such as 1FS or 2.1SS, and writes the
    tasks/dependencies document a Gantt chart loads.

    \b
    EXAMPLES:
      plan2gantt plan.json                          # Write data.json
      plan2gantt plan.json -o gantt.json            # Custom output file
      plan2gantt plan.json --project-name "Launch"  # Outline column key
      plan2gantt plan.json --column notes=Comments  # Remap a column
      plan2gantt - -o - < plan.json                 # Pipe stdin to stdout
    """
    from plan2gantt import log as glog
    from plan2gantt.response import convert

    glog.set_verbose(verbose)
    glog.use_stderr(output == STDIO)

    cfg = _build_config(project_name, header_rows, columns, output, indent, verbose)
    glog.debug(f"Outline column: {cfg.columns.outline!r}, header rows: {cfg.header_rows}")

    try:
        records = read_records(input_path)
        result = convert(records, cfg)
        write_document(cfg.output, result.document, indent=cfg.indent)
    except Plan2GanttError as exc:
        glog.error(str(exc))
        sys.exit(1)

    if result.stats.tasks == 0:
        glog.warn("No tasks found; check --project-name and --header-rows")
    if cfg.output != STDIO:
        glog.success(f"JSON data written to {cfg.output}")
    glog.summary(result.stats)
