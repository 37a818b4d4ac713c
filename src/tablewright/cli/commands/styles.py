"""Styles command: list the available border styles."""

from __future__ import annotations

from pathlib import Path

import typer

from tablewright.cli.common import load_settings, printer_and_provider
from tablewright.tables.models import BorderStyle
from tablewright.tables.table import StyledTable

DESCRIPTIONS: dict[BorderStyle, str] = {
    BorderStyle.MODERN: "Rounded corners with box-drawing characters",
    BorderStyle.BORDERLESS: "No borders, columns separated by spaces",
    BorderStyle.MARKDOWN: "GitHub-flavored Markdown table",
    BorderStyle.SHARP: "Square corners with box-drawing characters",
    BorderStyle.ASCII: "ASCII characters only",
    BorderStyle.PSQL: "Output in the style of psql",
    BorderStyle.DOTS: "Dots and colons",
}

SAMPLE_ROWS = [["alpha", "ok"], ["beta", "degraded"]]


def styles(
    preview: bool = typer.Option(
        False,
        "--preview",
        help="Render a sample table in every style.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Configuration file. Defaults to ~/.config/tablewright/config.yaml.",
    ),
) -> None:
    """List the border styles tables can be drawn with."""
    config = load_settings(config_path)
    printer, provider = printer_and_provider(config)
    base = config.table.to_style()

    if not preview:
        table = StyledTable(["Style", "Description"], style=base, width_provider=provider)
        for border in BorderStyle:
            marker = " (default)" if border == base.border else ""
            table.append_row([f"{border.value}{marker}", DESCRIPTIONS[border]])
        printer.text(table.render())
        return

    for border in BorderStyle:
        sample = StyledTable(["name", "status"], SAMPLE_ROWS, style=base, width_provider=provider)
        printer.info(border.value)
        printer.text(sample.border(border).render())
