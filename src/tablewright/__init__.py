"""Helpers for building command-line interfaces.

The centre of the toolkit is a responsive table renderer:

    from tablewright import StyledTable

    table = StyledTable(["name", "status"])
    table.append_row(["alpha", "ok"]).select_columns("status,name")
    print(table.render(width=40))
"""

from tablewright.__version__ import __version__
from tablewright.tables import (
    DEFAULT_TERMINAL_WIDTH,
    DEFAULT_TRUNCATION_SUFFIX,
    Alignment,
    BorderStyle,
    Column,
    ConsoleWidthProvider,
    FixedWidthProvider,
    InvalidStyle,
    InvalidWidth,
    Padding,
    RenderResult,
    RowWidthMismatch,
    StyledTable,
    TableError,
    TableStyle,
    TerminalWidthProvider,
    UnknownColumn,
    WrapPolicy,
    build_table_with_columns,
    display_option,
    display_option_or,
    parse_columns,
    responsive_width,
    select_columns,
    terminal_width,
    truncate_middle,
    truncate_string,
    truncate_with_suffix,
)

__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "DEFAULT_TRUNCATION_SUFFIX",
    "Alignment",
    "BorderStyle",
    "Column",
    "ConsoleWidthProvider",
    "FixedWidthProvider",
    "InvalidStyle",
    "InvalidWidth",
    "Padding",
    "RenderResult",
    "RowWidthMismatch",
    "StyledTable",
    "TableError",
    "TableStyle",
    "TerminalWidthProvider",
    "UnknownColumn",
    "WrapPolicy",
    "__version__",
    "build_table_with_columns",
    "display_option",
    "display_option_or",
    "parse_columns",
    "responsive_width",
    "select_columns",
    "terminal_width",
    "truncate_middle",
    "truncate_string",
    "truncate_with_suffix",
]
