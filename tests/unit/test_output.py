"""Tests for colored console output."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from tablewright.output import (
    OutputPrinter,
    format_bold,
    format_dimmed,
    format_error,
    format_info,
    format_success,
    format_warning,
    make_console,
)


def _buffer_console(**kwargs: object) -> Console:
    return Console(file=io.StringIO(), width=80, **kwargs)  # type: ignore[arg-type]


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestFormatters:
    """Test markup formatting helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("formatter", "tag"),
        [
            (format_success, "green"),
            (format_error, "red"),
            (format_warning, "yellow"),
            (format_info, "blue"),
            (format_dimmed, "dim"),
            (format_bold, "bold"),
        ],
    )
    def test_wraps_value_in_tag(self, formatter: object, tag: str) -> None:
        """Test each formatter wraps its value in the matching style tag."""
        assert formatter(42) == f"[{tag}]42[/{tag}]"  # type: ignore[operator]

    @pytest.mark.unit
    def test_escapes_markup(self) -> None:
        """Test values containing markup are escaped."""
        assert format_success("[red]x") == "[green]\\[red]x[/green]"


class TestMakeConsole:
    """Test console construction."""

    @pytest.mark.unit
    def test_no_color(self) -> None:
        """Test colorize=False disables styling."""
        assert make_console(False).no_color

    @pytest.mark.unit
    def test_color(self) -> None:
        """Test colorize=True keeps styling enabled."""
        assert not make_console(True).no_color

    @pytest.mark.unit
    def test_stderr(self) -> None:
        """Test stderr consoles write to standard error."""
        assert make_console(False, stderr=True).stderr


class TestOutputPrinter:
    """Test prefixed status messages."""

    @pytest.fixture
    def consoles(self) -> tuple[Console, Console]:
        return _buffer_console(), _buffer_console()

    @pytest.fixture
    def printer(self, consoles: tuple[Console, Console]) -> OutputPrinter:
        return OutputPrinter(*consoles)

    @pytest.mark.unit
    def test_success(self, printer: OutputPrinter, consoles: tuple[Console, Console]) -> None:
        """Test success messages get a check mark."""
        printer.success("Operation completed")
        assert _output(consoles[0]) == "✓ Operation completed\n"

    @pytest.mark.unit
    def test_error_goes_to_err_console(
        self, printer: OutputPrinter, consoles: tuple[Console, Console]
    ) -> None:
        """Test errors are written to the error console."""
        printer.error("Something went wrong")
        assert _output(consoles[0]) == ""
        assert _output(consoles[1]) == "✗ Something went wrong\n"

    @pytest.mark.unit
    def test_warning_and_info(
        self, printer: OutputPrinter, consoles: tuple[Console, Console]
    ) -> None:
        """Test warning and info prefixes."""
        printer.warning("Careful")
        printer.info("Processing")
        assert _output(consoles[0]) == "! Careful\n→ Processing\n"

    @pytest.mark.unit
    def test_dimmed(self, printer: OutputPrinter, consoles: tuple[Console, Console]) -> None:
        """Test dimmed messages print their text."""
        printer.dimmed("showing 1 of 3 columns")
        assert _output(consoles[0]) == "showing 1 of 3 columns\n"

    @pytest.mark.unit
    def test_messages_are_not_markup(
        self, printer: OutputPrinter, consoles: tuple[Console, Console]
    ) -> None:
        """Test user text with brackets is printed literally."""
        printer.success("[bold]value[/bold]")
        assert _output(consoles[0]) == "✓ [bold]value[/bold]\n"

    @pytest.mark.unit
    def test_text_is_not_wrapped(self, consoles: tuple[Console, Console]) -> None:
        """Test pre-rendered text wider than the console is printed unchanged."""
        console = Console(file=io.StringIO(), width=10)
        OutputPrinter(console).text("a line much wider than ten cells [x]")
        assert _output(console) == "a line much wider than ten cells [x]\n"

    @pytest.mark.unit
    def test_err_console_defaults_to_console(self) -> None:
        """Test a single console handles errors too."""
        console = _buffer_console()
        OutputPrinter(console).error("boom")
        assert _output(console) == "✗ boom\n"

    @pytest.mark.unit
    def test_colored_output(self) -> None:
        """Test colorized consoles emit ANSI escapes."""
        console = _buffer_console(force_terminal=True, color_system="standard")
        OutputPrinter(console).success("done")
        assert "\x1b[" in _output(console)

    @pytest.mark.unit
    def test_for_colorize(self) -> None:
        """Test the factory builds stdout and stderr consoles."""
        printer = OutputPrinter.for_colorize(False)
        assert printer.console.no_color
        assert printer.err_console.stderr
