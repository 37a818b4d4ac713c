"""Render command: print a CSV file as a table."""

from __future__ import annotations

import csv
from pathlib import Path

import structlog
import typer

from tablewright.cli.common import load_settings, printer_and_provider
from tablewright.exit_codes import ExitCode, exit_code_for
from tablewright.tables.errors import TableError
from tablewright.tables.models import BorderStyle, WrapPolicy
from tablewright.tables.table import StyledTable

logger = structlog.get_logger()


def render(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="CSV file whose first row holds the column names.",
    ),
    columns: str | None = typer.Option(
        None,
        "--columns",
        "-c",
        help="Comma-separated column names or 1-based positions, in display order, or 'all'.",
    ),
    style: BorderStyle | None = typer.Option(
        None,
        "--style",
        "-s",
        case_sensitive=False,
        help="Border style. Defaults to the configured style.",
    ),
    width: int | None = typer.Option(
        None,
        "--width",
        "-w",
        help="Target width. Defaults to the terminal width.",
    ),
    panel: str | None = typer.Option(
        None,
        "--panel",
        "-p",
        help="Title row spanning the table; replaces the header row.",
    ),
    no_header: bool = typer.Option(
        False,
        "--no-header",
        help="Omit the column names.",
    ),
    truncate: bool = typer.Option(
        False,
        "--truncate",
        help="Truncate long cells instead of wrapping them.",
    ),
    newlines: str | None = typer.Option(
        None,
        "--newlines",
        help="Replace newlines inside cells with this text.",
    ),
    delimiter: str = typer.Option(
        ",",
        "--delimiter",
        "-d",
        help="Field delimiter of the input file.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Configuration file. Defaults to ~/.config/tablewright/config.yaml.",
    ),
) -> None:
    """Render a CSV file as a table fitted to the terminal."""
    config = load_settings(config_path)
    printer, provider = printer_and_provider(config)

    try:
        with file.open(newline="", encoding="utf-8") as fh:
            records = list(csv.reader(fh, delimiter=delimiter))
    except (UnicodeDecodeError, csv.Error) as e:
        logger.debug("Unreadable CSV input", path=str(file), error=str(e))
        printer.error(f"Cannot parse {file}: {e}")
        raise typer.Exit(code=ExitCode.DATA_ERR) from e
    except OSError as e:
        logger.debug("Cannot open CSV input", path=str(file), error=str(e))
        printer.error(f"Cannot read {file}: {e}")
        raise typer.Exit(code=exit_code_for(e)) from e
    logger.info("Read CSV input", path=str(file), records=len(records))

    if not records:
        printer.warning(f"{file} is empty")
        raise typer.Exit()

    headers, *rows = records
    table = StyledTable(headers, rows, style=config.table.to_style(), width_provider=provider)
    try:
        if style is not None:
            table.border(style)
        if truncate:
            table.wrap_policy(WrapPolicy.TRUNCATE)
        if newlines is not None:
            table.replace_newlines(newlines)
        if columns:
            table.select_columns(columns)
        if no_header:
            table.remove_header_row()
        if panel:
            table.panel(panel)
        result = table.build(width)
    except TableError as e:
        logger.debug("Render failed", error=e.message, exit_code=int(e.exit_code))
        printer.error(e.message)
        raise typer.Exit(code=e.exit_code) from e

    printer.text(result.text)
    if result.is_partial:
        printer.dimmed(result.summary)
    logger.info("Rendered table", columns=result.shown_columns, rows=len(rows), width=result.width)
