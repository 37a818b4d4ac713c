"""Tests for exit code mapping."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tablewright.exit_codes import ExitCode, exit_code_for, run_with_exit_code
from tablewright.tables.errors import (
    InvalidStyle,
    InvalidWidth,
    RowWidthMismatch,
    TableError,
    UnknownColumn,
)


class TestExitCode:
    """Test exit code values."""

    @pytest.mark.unit
    def test_sysexits_values(self) -> None:
        """Test codes match sysexits.h."""
        assert ExitCode.OK == 0
        assert ExitCode.USAGE == 64
        assert ExitCode.DATA_ERR == 65
        assert ExitCode.SOFTWARE == 70
        assert ExitCode.CONFIG == 78


class TestExitCodeFor:
    """Test mapping exceptions to exit codes."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (UnknownColumn("owner"), ExitCode.USAGE),
            (InvalidWidth(0), ExitCode.USAGE),
            (RowWidthMismatch(2, 3), ExitCode.DATA_ERR),
            (InvalidStyle("bad"), ExitCode.CONFIG),
            (TableError("generic"), ExitCode.SOFTWARE),
            (FileNotFoundError("x"), ExitCode.NO_INPUT),
            (PermissionError("x"), ExitCode.NO_PERM),
            (OSError("x"), ExitCode.IO_ERR),
            (RuntimeError("x"), ExitCode.SOFTWARE),
        ],
    )
    def test_mapping(self, error: BaseException, expected: ExitCode) -> None:
        """Test each error class maps to its exit code."""
        assert exit_code_for(error) == expected


class TestRunWithExitCode:
    """Test running a callable with exit code handling."""

    @pytest.mark.unit
    def test_success_exits_zero(self) -> None:
        """Test a successful callable exits with OK."""
        printer = MagicMock()
        with pytest.raises(SystemExit) as exc_info:
            run_with_exit_code(lambda: None, printer)
        assert exc_info.value.code == 0
        printer.error.assert_not_called()

    @pytest.mark.unit
    def test_failure_prints_and_exits(self) -> None:
        """Test a failing callable reports the error and exits with its code."""
        printer = MagicMock()

        def fail() -> None:
            raise UnknownColumn("owner")

        with pytest.raises(SystemExit) as exc_info:
            run_with_exit_code(fail, printer)
        assert exc_info.value.code == ExitCode.USAGE
        printer.error.assert_called_once_with("unknown column: 'owner'")
