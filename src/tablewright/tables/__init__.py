"""Responsive table rendering.

Usage:
    from tablewright.tables import StyledTable, TableStyle

    table = StyledTable(["name", "status"], style=TableStyle(border="psql"))
    table.append_row(["alpha", "ok"])
    print(table.render(width=80))
"""

from tablewright.tables.errors import (
    InvalidStyle,
    InvalidWidth,
    RowWidthMismatch,
    TableError,
    UnknownColumn,
)
from tablewright.tables.layout import compute_widths, layout
from tablewright.tables.models import (
    Alignment,
    BorderStyle,
    Column,
    Padding,
    TableStyle,
    WrapPolicy,
)
from tablewright.tables.selector import parse_columns, select_columns
from tablewright.tables.table import (
    RenderResult,
    StyledTable,
    build_table_with_columns,
    display_option,
    display_option_or,
)
from tablewright.tables.terminal import (
    DEFAULT_TERMINAL_WIDTH,
    ConsoleWidthProvider,
    FixedWidthProvider,
    TerminalWidthProvider,
    responsive_width,
    terminal_width,
)
from tablewright.tables.text import (
    DEFAULT_TRUNCATION_SUFFIX,
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
    "build_table_with_columns",
    "compute_widths",
    "display_option",
    "display_option_or",
    "layout",
    "parse_columns",
    "responsive_width",
    "select_columns",
    "terminal_width",
    "truncate_middle",
    "truncate_string",
    "truncate_with_suffix",
]
