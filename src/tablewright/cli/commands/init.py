"""Init command: write the default configuration file."""

from __future__ import annotations

import structlog
import typer
from rich.console import Console
from rich.panel import Panel

from tablewright.core.config import models
from tablewright.core.config.models import ToolkitConfig
from tablewright.exit_codes import ExitCode

app = typer.Typer(help="Create the tablewright configuration file.")
console = Console()
logger = structlog.get_logger()


@app.callback(invoke_without_command=True)
def init(
    ctx: typer.Context,
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration.",
    ),
) -> None:
    """Write default table settings to ~/.config/tablewright/config.yaml."""
    if ctx.invoked_subcommand is not None:
        return

    config_file = models.CONFIG_FILE
    logger.info("Initializing config", path=str(config_file))

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(code=ExitCode.CANT_CREAT)

    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(ToolkitConfig().to_yaml())

    console.print(
        Panel(
            f"[green]Configuration written to {config_file}[/green]\n\n"
            f"Next steps:\n"
            f"  1. Pick a default border style under [bold]table.border[/bold]\n"
            f"  2. Run [bold]tablewright styles --preview[/bold] to compare styles",
            title="tablewright init",
            border_style="green",
        )
    )

    logger.info("Configuration initialized", config_file=str(config_file))
