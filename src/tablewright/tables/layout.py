"""Responsive table layout.

Turns columns, string rows and a ``TableStyle`` into physical output lines
that fit a target width. Layout is a pure function of its inputs: the same
table rendered twice produces byte-identical text.

Width allocation:

1. Hinted columns (``Column.width``) get exactly their hint, even when the
   hints alone overflow the target.
2. Flexible columns start at their natural width, the widest physical line
   in the column.
3. If the flexible columns do not fit, the widest ones are capped first
   (water filling): every column wider than a common cap ``L`` is cut down
   to ``L``, never below its floor. Cells left over after capping go one
   each to the capped columns, leftmost first.
4. A wrapped column is never narrower than its widest glyph, so a
   one-cell column holding CJK text grows to two cells.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from tablewright.tables.borders import Frame, frame_for
from tablewright.tables.errors import InvalidStyle, InvalidWidth, RowWidthMismatch
from tablewright.tables.models import Alignment, Column, TableStyle, WrapPolicy
from tablewright.tables.text import cell_width, fit, truncate_with_suffix

Row = Sequence[str]


def normalize_newlines(text: str, separator: str | None) -> str:
    """Prepare cell text for measuring.

    Tabs are expanded and ``\\r\\n`` collapsed to ``\\n``. With a separator,
    every newline is replaced by it; applying this twice changes nothing.
    """
    text = text.replace("\r\n", "\n").expandtabs(4)
    if separator is not None:
        text = text.replace("\n", separator)
    return text


def natural_width(text: str) -> int:
    """Width of the widest hard line in ``text``."""
    return max(cell_width(line) for line in text.split("\n"))


def widest_glyph(text: str) -> int:
    """Width of the widest single character in ``text``, at least 1."""
    return max((cell_width(char) for char in text), default=1)


def column_floor(style: TableStyle) -> int:
    """Smallest width a flexible column is shrunk to."""
    return style.padding.horizontal + 1


def compute_widths(
    columns: Sequence[Column],
    rows: Sequence[Row],
    style: TableStyle,
    target_width: int,
) -> list[int]:
    """Compute the content width of every column.

    Args:
        columns: Columns being rendered.
        rows: Normalized rows used for measuring, header row included when
            it is shown.
        style: Style providing borders and padding.
        target_width: Total width the rendered table should fit in.

    Returns:
        Content widths, padding and borders excluded.
    """
    count = len(columns)
    if count == 0:
        return []

    frame = frame_for(style.border)
    budget = target_width - frame.overhead(count) - count * style.padding.horizontal

    widths: list[int] = []
    for index, column in enumerate(columns):
        if column.width is not None:
            widths.append(column.width)
        else:
            widths.append(max([1, *(natural_width(row[index]) for row in rows)]))

    flexible = [i for i, column in enumerate(columns) if column.width is None]
    hinted_total = sum(widths[i] for i in range(count) if i not in flexible)
    flex_budget = budget - hinted_total
    if sum(widths[i] for i in flexible) <= flex_budget:
        return widths

    return _shrink(widths, flexible, flex_budget, column_floor(style))


def _shrink(widths: list[int], flexible: list[int], budget: int, floor: int) -> list[int]:
    """Cap the widest flexible columns until they fit ``budget``."""
    natural = {i: widths[i] for i in flexible}
    floors = {i: min(natural[i], floor) for i in flexible}
    result = list(widths)

    if sum(floors.values()) >= budget:
        for i in flexible:
            result[i] = floors[i]
        return result

    def total_at(cap: int) -> int:
        return sum(max(floors[i], min(natural[i], cap)) for i in flexible)

    low, high = 0, max(natural.values())
    while low < high:
        mid = (low + high + 1) // 2
        if total_at(mid) <= budget:
            low = mid
        else:
            high = mid - 1
    cap = low

    for i in flexible:
        result[i] = max(floors[i], min(natural[i], cap))

    leftover = budget - total_at(cap)
    for i in flexible:
        if leftover <= 0:
            break
        if natural[i] > cap >= floors[i]:
            result[i] += 1
            leftover -= 1
    return result


def layout_cell(
    text: str,
    width: int,
    policy: WrapPolicy,
    ellipsis: str,
    console: Console,
) -> list[str]:
    """Split one cell into physical lines no wider than ``width``.

    Args:
        text: Normalized cell text.
        width: Content width of the column.
        policy: ``wrap`` breaks at word boundaries, folding words longer than
            the column. Lines it starts never begin with a space and are never
            blank; blank hard lines are kept. ``truncate`` cuts each hard line
            and appends ``ellipsis``.
        ellipsis: Truncation marker.
        console: Console used by Rich for wrapping.

    Returns:
        The cell's physical lines, unpadded.
    """
    if width <= 0:
        return [""]
    if policy == WrapPolicy.TRUNCATE:
        return [truncate_with_suffix(line, width, ellipsis) for line in text.split("\n")]

    lines: list[str] = []
    for hard_line in text.split("\n"):
        folded = Text(hard_line).wrap(console, width, overflow="fold")
        wrapped = [line.plain.rstrip() for line in folded]
        # Soft breaks leave the folded word's trailing space on the next line.
        continuations = (line.lstrip() for line in wrapped[1:])
        lines.append(wrapped[0] if wrapped else "")
        lines.extend(line for line in continuations if line)
    return lines


def layout(
    columns: Sequence[Column],
    rows: Sequence[Row],
    style: TableStyle,
    target_width: int,
    *,
    show_header: bool = True,
    panel: str | None = None,
) -> list[str]:
    """Render a table to physical lines.

    Args:
        columns: Columns to render, in display order.
        rows: Rows whose cells line up with ``columns``.
        style: Rendering configuration.
        target_width: Width the table should fit in, usually the terminal width.
        show_header: Whether to render the column names as a header row.
        panel: Optional title rendered as a full-width row above the data.
            A panel always replaces the header row.

    Returns:
        Output lines without trailing newlines.

    Raises:
        InvalidWidth: If ``target_width`` is not positive.
        RowWidthMismatch: If a row's cell count differs from the column count.
        InvalidStyle: If a column cannot be laid out with the style.
    """
    if target_width <= 0:
        raise InvalidWidth(target_width)
    for row in rows:
        if len(row) != len(columns):
            raise RowWidthMismatch(len(columns), len(row))
    for column in columns:
        if column.width == 0 and style.policy_for(column) == WrapPolicy.WRAP:
            raise InvalidStyle(f"column {column.name!r} cannot wrap at zero width")

    effective = target_width
    if style.max_width is not None:
        effective = min(target_width, style.max_width)

    separator = style.newline_separator
    headers = [normalize_newlines(column.name, separator) for column in columns]
    body = [[normalize_newlines(cell, separator) for cell in row] for row in rows]
    title = normalize_newlines(panel, separator) if panel is not None else None
    if title is not None:
        show_header = False

    if not columns and title is None:
        return []

    measured = [headers, *body] if show_header else body
    widths = compute_widths(columns, measured, style, effective)
    frame = frame_for(style.border)
    if title is not None:
        widths = _widen_for_panel(columns, widths, title, style, effective)
    # Wrapped columns are at least as wide as their widest glyph.
    for index, column in enumerate(columns):
        if style.policy_for(column) == WrapPolicy.WRAP:
            glyph = max(widest_glyph(row[index]) for row in measured) if measured else 1
            widths[index] = max(widths[index], glyph)

    console = Console(
        file=io.StringIO(),
        width=max(effective, 1),
        color_system=None,
        legacy_windows=False,
    )
    pad = style.padding
    cell_widths = [width + pad.horizontal for width in widths]
    lines: list[str] = []

    def rule(line: str) -> None:
        if line.strip():
            lines.append(line)

    outline = cell_widths
    if title is not None:
        inner = _inner_width(frame, cell_widths, title, style, effective)
        if not columns:
            outline = [inner]
        rule(frame.top([inner]))
        text_width = max(inner - pad.horizontal, 1)
        for line in layout_cell(title, text_width, WrapPolicy.WRAP, style.ellipsis, console):
            cell = " " * pad.left + fit(line, text_width, Alignment.CENTER) + " " * pad.right
            lines.append(frame.content_line([fit(cell, inner)], "head"))
        if columns:
            rule(frame.panel_separator(cell_widths))
    else:
        rule(frame.top(cell_widths))

    if show_header:
        for cells in _block(headers, columns, widths, style, console):
            lines.append(frame.content_line(cells, "head"))
        rule(frame.separator(cell_widths))

    for row in body:
        for cells in _block(row, columns, widths, style, console):
            lines.append(frame.content_line(cells, "body"))

    rule(frame.bottom(outline))
    return lines


def _block(
    row: Sequence[str],
    columns: Sequence[Column],
    widths: Sequence[int],
    style: TableStyle,
    console: Console,
) -> list[list[str]]:
    """Lay out one logical row as a list of physical lines of padded cells."""
    pad = style.padding
    cells = [
        layout_cell(text, width, style.policy_for(column), style.ellipsis, console)
        for text, column, width in zip(row, columns, widths, strict=True)
    ]
    height = max((len(lines) for lines in cells), default=1)
    blank = [""] * pad.top
    physical: list[list[str]] = []
    for lines, column, width in zip(cells, columns, widths, strict=True):
        padded = blank + lines + [""] * (height - len(lines)) + [""] * pad.bottom
        physical.append(
            [" " * pad.left + fit(line, width, column.align) + " " * pad.right for line in padded]
        )
    return [list(line) for line in zip(*physical, strict=True)]


def _inner_width(
    frame: Frame,
    cell_widths: Sequence[int],
    title: str,
    style: TableStyle,
    effective: int,
) -> int:
    """Width between the outer edges, shared by all columns or by a panel."""
    if cell_widths:
        return sum(cell_widths) + len(cell_widths) - 1
    edges = 2 if frame.edges else 0
    return max(min(natural_width(title) + style.padding.horizontal, effective - edges), 1)


def _widen_for_panel(
    columns: Sequence[Column],
    widths: list[int],
    title: str,
    style: TableStyle,
    effective: int,
) -> list[int]:
    """Widen flexible columns so a panel title fits, without passing ``effective``."""
    flexible = [i for i, column in enumerate(columns) if column.width is None]
    if not flexible:
        return widths

    frame = frame_for(style.border)
    count = len(columns)
    current = sum(widths) + count * style.padding.horizontal + frame.overhead(count)
    wanted = natural_width(title) + style.padding.horizontal + (2 if frame.edges else 0)
    extra = min(wanted, effective) - current
    if extra <= 0:
        return widths

    result = list(widths)
    share, remainder = divmod(extra, len(flexible))
    for position, i in enumerate(flexible):
        result[i] += share + (1 if position < remainder else 0)
    return result
