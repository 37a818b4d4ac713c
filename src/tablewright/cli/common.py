"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from pydantic import ValidationError

from tablewright.core.config.models import ToolkitConfig, load_config
from tablewright.exit_codes import ExitCode
from tablewright.output import OutputPrinter
from tablewright.tables.errors import InvalidStyle
from tablewright.tables.terminal import ConsoleWidthProvider

logger = structlog.get_logger()


def load_settings(path: Path | None) -> ToolkitConfig:
    """Load the configuration, falling back to defaults when there is none.

    Exits with ``ExitCode.CONFIG`` when the file exists but is invalid.
    """
    try:
        config = load_config(path)
    except (ValueError, ValidationError, InvalidStyle) as e:
        logger.debug("Configuration rejected", path=str(path) if path else None, error=str(e))
        OutputPrinter.for_colorize(False).error(f"Invalid configuration: {e}")
        raise typer.Exit(code=ExitCode.CONFIG) from e
    return config or ToolkitConfig()


def printer_and_provider(config: ToolkitConfig) -> tuple[OutputPrinter, ConsoleWidthProvider]:
    """Build the printer and width provider sharing one colorize decision."""
    probe = ConsoleWidthProvider(
        utilization=config.output.width_utilization,
        fallback=config.output.fallback_width,
    )
    colorize = config.output.color and probe.is_color_capable()
    printer = OutputPrinter.for_colorize(colorize)
    provider = ConsoleWidthProvider(
        printer.console,
        utilization=config.output.width_utilization,
        fallback=config.output.fallback_width,
    )
    return printer, provider
