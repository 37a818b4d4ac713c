"""Table rendering exceptions."""

from __future__ import annotations

from tablewright.exit_codes import ExitCode


class TableError(Exception):
    """Base exception for table building and rendering.

    Attributes:
        message: Human-readable error message.
        exit_code: Exit code a CLI should use when this error ends the process.
    """

    exit_code: ExitCode = ExitCode.SOFTWARE

    def __init__(self, message: str) -> None:
        """Initialize TableError.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message


class UnknownColumn(TableError):
    """Raised when a column selection names a column the table does not have."""

    exit_code = ExitCode.USAGE

    def __init__(self, token: str) -> None:
        """Initialize UnknownColumn.

        Args:
            token: The offending name or position, as the caller gave it.
        """
        super().__init__(f"unknown column: {token!r}")
        self.token = token


class RowWidthMismatch(TableError):
    """Raised at render time when a row's cell count differs from the column count."""

    exit_code = ExitCode.DATA_ERR

    def __init__(self, expected: int, actual: int) -> None:
        """Initialize RowWidthMismatch.

        Args:
            expected: Number of columns in the table.
            actual: Number of cells in the offending row.
        """
        super().__init__(f"row has {actual} cells, expected {expected}")
        self.expected = expected
        self.actual = actual


class InvalidWidth(TableError):
    """Raised when a non-positive width is supplied or computed."""

    exit_code = ExitCode.USAGE

    def __init__(self, value: int) -> None:
        super().__init__(f"width must be positive, got {value}")
        self.value = value


class InvalidStyle(TableError):
    """Raised when a style configuration has contradictory settings."""

    exit_code = ExitCode.CONFIG

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid table style: {reason}")
        self.reason = reason
