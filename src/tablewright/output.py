"""Colored console output for CLI applications.

Messages are written through Rich consoles built from an explicit colorize
decision, so tables, progress bars and messages agree on whether color is
used:

    printer = OutputPrinter.for_colorize(provider.is_color_capable())
    printer.success("Operation completed")   # ✓ Operation completed
    printer.error("Something went wrong")    # ✗ Something went wrong (stderr)
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def make_console(colorize: bool, stderr: bool = False) -> Console:
    """Create a console honoring the colorize decision.

    Args:
        colorize: Whether ANSI styling may be emitted.
        stderr: Write to standard error instead of standard output.
    """
    return Console(no_color=not colorize, highlight=False, stderr=stderr)


def format_success(value: object) -> str:
    """Format a value as success (green)."""
    return f"[green]{escape(str(value))}[/green]"


def format_error(value: object) -> str:
    """Format a value as error (red)."""
    return f"[red]{escape(str(value))}[/red]"


def format_warning(value: object) -> str:
    """Format a value as warning (yellow)."""
    return f"[yellow]{escape(str(value))}[/yellow]"


def format_info(value: object) -> str:
    """Format a value as info (blue)."""
    return f"[blue]{escape(str(value))}[/blue]"


def format_dimmed(value: object) -> str:
    """Format a value as dimmed/muted."""
    return f"[dim]{escape(str(value))}[/dim]"


def format_bold(value: object) -> str:
    """Format a value as bold."""
    return f"[bold]{escape(str(value))}[/bold]"


class OutputPrinter:
    """Prints prefixed status messages.

    Attributes:
        console: Console for regular output.
        err_console: Console for errors.
    """

    def __init__(self, console: Console, err_console: Console | None = None) -> None:
        self.console = console
        self.err_console = err_console or console

    @classmethod
    def for_colorize(cls, colorize: bool) -> OutputPrinter:
        """Build a printer writing to stdout and stderr."""
        return cls(make_console(colorize), make_console(colorize, stderr=True))

    def success(self, message: object) -> None:
        """Print a message with a green check mark prefix."""
        self.console.print(f"[bold green]✓[/bold green] {escape(str(message))}")

    def error(self, message: object) -> None:
        """Print a message to stderr with a red cross prefix."""
        self.err_console.print(f"[bold red]✗[/bold red] {escape(str(message))}")

    def warning(self, message: object) -> None:
        """Print a message with a yellow exclamation mark prefix."""
        self.console.print(f"[bold yellow]![/bold yellow] {escape(str(message))}")

    def info(self, message: object) -> None:
        """Print a message with a blue arrow prefix."""
        self.console.print(f"[bold blue]→[/bold blue] {escape(str(message))}")

    def dimmed(self, message: object) -> None:
        """Print secondary information or hints."""
        self.console.print(format_dimmed(message))

    def text(self, text: str) -> None:
        """Print pre-rendered text, such as a table, without markup or wrapping."""
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
