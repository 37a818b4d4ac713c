"""CLI exit codes following the BSD sysexits conventions.

Errors raised by the toolkit carry an ``exit_code`` attribute so the CLI
layer can turn them into a process status without a lookup table:

    try:
        text = table.render()
    except TableError as e:
        printer.error(e.message)
        raise typer.Exit(code=e.exit_code)
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import IntEnum
from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from tablewright.output import OutputPrinter


class ExitCode(IntEnum):
    """Process exit codes from ``sysexits.h``."""

    OK = 0
    USAGE = 64
    DATA_ERR = 65
    NO_INPUT = 66
    NO_USER = 67
    NO_HOST = 68
    UNAVAILABLE = 69
    SOFTWARE = 70
    OS_ERR = 71
    OS_FILE = 72
    CANT_CREAT = 73
    IO_ERR = 74
    TEMP_FAIL = 75
    PROTOCOL = 76
    NO_PERM = 77
    CONFIG = 78


def exit_code_for(error: BaseException) -> ExitCode:
    """Map an exception to the exit code a CLI should terminate with.

    Errors exposing an ``exit_code`` attribute decide for themselves. Missing
    files and permission problems get their dedicated codes; anything else is
    an internal software error.
    """
    code = getattr(error, "exit_code", None)
    if code is not None:
        return ExitCode(code)
    if isinstance(error, FileNotFoundError):
        return ExitCode.NO_INPUT
    if isinstance(error, PermissionError):
        return ExitCode.NO_PERM
    if isinstance(error, OSError):
        return ExitCode.IO_ERR
    return ExitCode.SOFTWARE


def run_with_exit_code(func: Callable[[], object], printer: OutputPrinter) -> NoReturn:
    """Run ``func`` and exit the process with the matching status.

    Args:
        func: Zero-argument callable doing the real work.
        printer: Printer used to report the error on stderr.
    """
    try:
        func()
    except Exception as e:
        printer.error(str(e))
        sys.exit(int(exit_code_for(e)))
    sys.exit(int(ExitCode.OK))
