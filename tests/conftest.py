"""Shared pytest fixtures for tablewright tests."""

from __future__ import annotations

import io
import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import structlog
from rich.console import Console
from typer.testing import CliRunner

from tablewright.tables.terminal import FixedWidthProvider


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def width_provider() -> FixedWidthProvider:
    """A provider reporting an 80 column terminal without color."""
    return FixedWidthProvider(80)


@pytest.fixture
def capture_console() -> Console:
    """A console writing to memory, without color, 80 columns wide."""
    return Console(file=io.StringIO(), width=80, color_system=None, force_terminal=False)


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """A small CSV file with three columns."""
    path = tmp_path / "services.csv"
    path.write_text(
        "name,status,owner\n"
        "alpha,ok,platform\n"
        "beta,a very long status string that needs wrapping,search\n"
    )
    return path


@pytest.fixture(autouse=True)
def config_file(tmp_path: Path) -> Generator[Path]:
    """Point the default config location into the test's tmp dir."""
    path = tmp_path / "config" / "config.yaml"
    with patch("tablewright.core.config.models.CONFIG_FILE", path):
        yield path


@pytest.fixture(autouse=True)
def mock_configure_logging() -> Generator[MagicMock]:
    """Stop CLI invocations from installing log handlers on the root logger.

    Log output is silenced so it does not mix with captured command output.
    """
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    with patch("tablewright.cli.main.configure_logging") as mock:
        yield mock
    structlog.reset_defaults()
