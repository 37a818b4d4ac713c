"""Terminal width detection.

Rendering reads the environment only through a ``TerminalWidthProvider``, so
tables can be rendered in tests without a real terminal:

    table = StyledTable(["name"], width_provider=FixedWidthProvider(40))
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog
from rich.console import Console

logger = structlog.get_logger()

# Used when the width cannot be determined, e.g. output piped to a file
DEFAULT_TERMINAL_WIDTH = 120


@runtime_checkable
class TerminalWidthProvider(Protocol):
    """Source of the terminal width and color capability."""

    def current_width(self) -> int:
        """Return the width tables should fit in."""
        ...

    def is_color_capable(self) -> bool:
        """Return whether output goes to a color-capable terminal."""
        ...


class ConsoleWidthProvider:
    """Width provider backed by a Rich console.

    Attributes:
        console: Console whose output stream is measured.
        utilization: Fraction of the terminal width to use, in (0, 1].
        fallback: Width used when the console is not a terminal.
    """

    def __init__(
        self,
        console: Console | None = None,
        utilization: float = 1.0,
        fallback: int = DEFAULT_TERMINAL_WIDTH,
    ) -> None:
        self.console = console or Console()
        self.utilization = min(max(utilization, 0.0), 1.0)
        self.fallback = fallback

    def current_width(self) -> int:
        if self.console.is_terminal:
            width = self.console.size.width
        else:
            logger.debug("Output is not a terminal, using fallback width", width=self.fallback)
            width = self.fallback
        return max(int(width * self.utilization), 1)

    def is_color_capable(self) -> bool:
        return self.console.is_terminal and self.console.color_system is not None


class FixedWidthProvider:
    """Width provider returning constant values."""

    def __init__(self, width: int = DEFAULT_TERMINAL_WIDTH, color: bool = False) -> None:
        self.width = width
        self.color = color

    def current_width(self) -> int:
        return self.width

    def is_color_capable(self) -> bool:
        return self.color


def terminal_width() -> int:
    """Return the current terminal width, or ``DEFAULT_TERMINAL_WIDTH``."""
    return ConsoleWidthProvider().current_width()


def responsive_width(utilization: float) -> int:
    """Return a table width that leaves a margin in the terminal.

    Args:
        utilization: Fraction of the terminal width to use, clamped to
            [0, 1]. 0.85 is a common choice.
    """
    return ConsoleWidthProvider(utilization=utilization).current_width()
