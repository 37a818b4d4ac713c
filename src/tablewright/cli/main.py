"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from rich.console import Console

from tablewright import __version__
from tablewright.cli.commands import init, render, styles
from tablewright.logging.config import configure_logging

app = typer.Typer(
    name="tablewright",
    help="Render CSV data as responsive terminal tables.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tablewright version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
) -> None:
    """tablewright - responsive tables for the terminal."""
    configure_logging(verbose=verbose, debug=debug)


app.add_typer(init.app, name="init")
app.command()(render.render)
app.command()(styles.styles)


if __name__ == "__main__":
    app()
