"""Styled table builder.

``StyledTable`` owns columns, rows and a ``TableStyle`` and renders them
through the layout engine. Mutators validate their arguments immediately
and return the table, so calls chain:

    text = (
        StyledTable(["name", "status", "age"], style=config.table.to_style())
        .extend_rows(rows)
        .select_columns("status,name")
        .wrap_column("status", 30)
        .panel("Services")
        .render()
    )

Rendering never mutates the table and can be repeated. The only environment
read is the injected ``TerminalWidthProvider``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Self

from pydantic import BaseModel, ConfigDict

from tablewright.tables.errors import InvalidStyle, InvalidWidth, RowWidthMismatch
from tablewright.tables.layout import layout
from tablewright.tables.models import BorderStyle, Column, Padding, TableStyle, WrapPolicy
from tablewright.tables.selector import ColumnRef, select_columns
from tablewright.tables.terminal import ConsoleWidthProvider, TerminalWidthProvider


class RenderResult(BaseModel):
    """Rendered table text plus the column counts behind it.

    Attributes:
        lines: Physical output lines.
        shown_columns: Number of columns rendered.
        total_columns: Number of columns the table has.
        width: Target width the table was laid out for.
    """

    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...]
    shown_columns: int
    total_columns: int
    width: int

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def is_partial(self) -> bool:
        """True when a column selection hid some columns."""
        return self.shown_columns < self.total_columns

    @property
    def summary(self) -> str:
        """Message suitable for CLI output, e.g. ``showing 4 of 9 columns``."""
        return f"showing {self.shown_columns} of {self.total_columns} columns"

    def __str__(self) -> str:
        return self.text


class StyledTable:
    """A table builder with responsive rendering.

    Args:
        columns: Column definitions or plain column names.
        rows: Initial rows; each row is a sequence of cell strings.
        style: Rendering configuration. Defaults to ``TableStyle()``.
        width_provider: Source of the target width when none is given to
            ``build``. Defaults to the terminal behind stdout.
    """

    def __init__(
        self,
        columns: Sequence[Column | str] = (),
        rows: Iterable[Sequence[str]] = (),
        *,
        style: TableStyle | None = None,
        width_provider: TerminalWidthProvider | None = None,
    ) -> None:
        self._columns: list[Column] = [
            column if isinstance(column, Column) else Column(name=column) for column in columns
        ]
        self._rows: list[tuple[str, ...]] = [tuple(row) for row in rows]
        self._style = style or TableStyle()
        if width_provider is None:
            width_provider = ConsoleWidthProvider()
        self._width_provider = width_provider
        self._selection: list[int] | None = None
        self._header_removed = False
        self._panel: str | None = None
        self._width: int | None = None

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, object]],
        columns: Sequence[str] | None = None,
        *,
        style: TableStyle | None = None,
        width_provider: TerminalWidthProvider | None = None,
    ) -> StyledTable:
        """Build a table from mappings, one row per mapping.

        Values are stringified with ``display_option``; missing keys render
        as empty cells.

        Args:
            records: Row mappings, e.g. ``model.model_dump()`` results.
            columns: Keys to use as columns. Defaults to the keys of the
                first record.
            style: Rendering configuration.
            width_provider: Source of the target width.
        """
        records = list(records)
        if columns is None:
            columns = list(records[0]) if records else []
        rows = [[display_option(record.get(key)) for key in columns] for record in records]
        return cls(columns, rows, style=style, width_provider=width_provider)

    @property
    def all_columns(self) -> list[Column]:
        """Every column, in native order."""
        return list(self._columns)

    @property
    def columns(self) -> list[Column]:
        """Columns that will be rendered, in display order."""
        return [self._columns[i] for i in self._selected_indices()]

    @property
    def rows(self) -> list[tuple[str, ...]]:
        return list(self._rows)

    @property
    def style(self) -> TableStyle:
        return self._style

    @property
    def width_provider(self) -> TerminalWidthProvider:
        return self._width_provider

    def add_column(self, column: Column | str, fill: str = "") -> Self:
        """Append a column, giving every existing row a ``fill`` cell for it."""
        self._columns.append(column if isinstance(column, Column) else Column(name=column))
        self._rows = [(*row, fill) for row in self._rows]
        return self

    def remove_column(self, column: ColumnRef) -> Self:
        """Remove a column and its cell from every row.

        Raises:
            UnknownColumn: If ``column`` names no column.
        """
        index = self._index_of(column)
        del self._columns[index]
        self._rows = [row[:index] + row[index + 1 :] for row in self._rows]
        if self._selection is not None:
            self._selection = [i - 1 if i > index else i for i in self._selection if i != index]
        return self

    def append_row(self, cells: Sequence[str]) -> Self:
        """Append a row of cell strings.

        The cell count is checked at render time, because a later column
        change can make a row valid or invalid.
        """
        self._rows.append(tuple(cells))
        return self

    def extend_rows(self, rows: Iterable[Sequence[str]]) -> Self:
        for row in rows:
            self.append_row(row)
        return self

    def remove_header_row(self) -> Self:
        """Do not render the column names.

        Useful for non-interactive or scriptable output where headers are noise.
        """
        self._header_removed = True
        return self

    def panel(self, title: str) -> Self:
        """Render ``title`` as a full-width row above the data.

        A panel replaces the header row, whatever order the calls were made in.
        """
        self._panel = title
        return self

    def border(self, border: BorderStyle | str) -> Self:
        """Use another border style.

        Raises:
            InvalidStyle: If ``border`` is not a known style name.
        """
        try:
            border = BorderStyle(border)
        except ValueError:
            choices = ", ".join(style.value for style in BorderStyle)
            raise InvalidStyle(f"unknown border style {border!r} (choose from {choices})") from None
        self._style = self._style.evolve(border=border)
        return self

    def padding(self, padding: Padding | int) -> Self:
        """Set cell padding; an integer pads left and right by that many spaces.

        Raises:
            InvalidStyle: If any padding value is negative.
        """
        if not isinstance(padding, Padding):
            padding = Padding.uniform(padding)
        self._style = self._style.evolve(padding=padding)
        return self

    def replace_newlines(self, separator: str) -> Self:
        """Replace newlines inside cells with ``separator``.

        Useful for non-interactive output where newlines would break parsing;
        ``","`` turns multi-line values into comma-separated lists.
        """
        self._style = self._style.evolve(newline_separator=separator)
        return self

    def wrap_policy(self, policy: WrapPolicy | str) -> Self:
        """Set the overflow policy for columns without their own."""
        self._style = self._style.evolve(wrap_policy=policy)
        return self

    def wrap_column(self, column: ColumnRef, width: int) -> Self:
        """Wrap ``column`` at ``width`` characters.

        Args:
            column: Column name or 1-based position.
            width: Content width of the column.
        """
        return self._update_column(column, width=width, wrap=WrapPolicy.WRAP)

    def truncate_column(self, column: ColumnRef, width: int) -> Self:
        """Truncate ``column`` to ``width`` characters, ellipsis included."""
        return self._update_column(column, width=width, wrap=WrapPolicy.TRUNCATE)

    def max_width(self, width: int) -> Self:
        """Cap the total rendered width, whatever the terminal width."""
        if width <= 0:
            raise InvalidWidth(width)
        self._style = self._style.evolve(max_width=width)
        return self

    def width(self, width: int) -> Self:
        """Render for ``width`` instead of asking the width provider."""
        if width <= 0:
            raise InvalidWidth(width)
        self._width = width
        return self

    def select_columns(self, spec: str | Sequence[ColumnRef] | None) -> Self:
        """Show only the requested columns, in the requested order.

        Args:
            spec: Comma-separated string, sequence of names or 1-based
                positions, or None/empty/"all" for every column.

        Raises:
            UnknownColumn: If a requested column does not exist.
        """
        self._selection = select_columns(spec, [column.name for column in self._columns])
        return self

    def build(self, width: int | None = None) -> RenderResult:
        """Render the table.

        Args:
            width: Target width. Defaults to the width set with ``width()``,
                then to the width provider.

        Returns:
            The rendered lines and column counts.

        Raises:
            InvalidWidth: If the target width is not positive.
            RowWidthMismatch: If a row's cell count differs from the column count.
        """
        target = width if width is not None else self._width
        if target is None:
            target = self._width_provider.current_width()
        if target <= 0:
            raise InvalidWidth(target)

        expected = len(self._columns)
        for row in self._rows:
            if len(row) != expected:
                raise RowWidthMismatch(expected, len(row))

        indices = self._selected_indices()
        columns = [self._columns[i] for i in indices]
        rows = [[row[i] for i in indices] for row in self._rows]
        lines = layout(
            columns,
            rows,
            self._style,
            target,
            show_header=not self._header_removed,
            panel=self._panel,
        )
        return RenderResult(
            lines=tuple(lines),
            shown_columns=len(columns),
            total_columns=expected,
            width=target,
        )

    def render(self, width: int | None = None) -> str:
        """Render the table to a single string."""
        return self.build(width).text

    def _selected_indices(self) -> list[int]:
        if self._selection is None:
            return list(range(len(self._columns)))
        return list(self._selection)

    def _index_of(self, column: ColumnRef) -> int:
        return select_columns([column], [c.name for c in self._columns])[0]

    def _update_column(self, column: ColumnRef, **changes: object) -> Self:
        index = self._index_of(column)
        self._columns[index] = Column.model_validate({**dict(self._columns[index]), **changes})
        return self


def display_option(value: object | None) -> str:
    """Format an optional value for a table cell; None becomes an empty string."""
    return "" if value is None else str(value)


def display_option_or(value: object | None, default: str) -> str:
    """Format an optional value for a table cell, with a default for None."""
    return default if value is None else str(value)


def build_table_with_columns(
    headers: Sequence[str],
    records: Iterable[Sequence[object]],
    columns: str | Sequence[ColumnRef],
    *,
    style: TableStyle | None = None,
    width_provider: TerminalWidthProvider | None = None,
) -> StyledTable:
    """Build a table holding only the requested columns.

    Columns match case-insensitively and keep the requested order. Unlike
    ``StyledTable.select_columns`` the other columns are dropped from the
    table entirely.

    Args:
        headers: Names of the fields in each record.
        records: Field values, stringified with ``display_option``.
        columns: Requested columns, as for ``select_columns``.
        style: Rendering configuration.
        width_provider: Source of the target width.

    Raises:
        UnknownColumn: If a requested column does not exist.
    """
    indices = select_columns(columns, headers)
    rows = [[display_option(record[i]) for i in indices] for record in records]
    return StyledTable(
        [headers[i] for i in indices], rows, style=style, width_provider=width_provider
    )
