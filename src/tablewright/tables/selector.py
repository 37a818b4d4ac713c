"""Column selection for table output.

A selection is both a filter and a reordering: the columns come back in the
order the user asked for them, so ``--columns status,name`` shows "status"
first.
"""

from __future__ import annotations

from collections.abc import Sequence

from tablewright.tables.errors import UnknownColumn

ALL_COLUMNS = "all"

ColumnRef = str | int


def parse_columns(columns_arg: str) -> list[str]:
    """Parse a comma-separated column list into lowercase column names.

    Trims whitespace and drops empty entries. ``"all"`` on its own means every
    column and parses to an empty list.

    Args:
        columns_arg: Raw value of a ``--columns`` style option.

    Returns:
        Requested column tokens, in order.
    """
    tokens = [part.strip().lower() for part in columns_arg.split(",")]
    tokens = [token for token in tokens if token]
    if tokens == [ALL_COLUMNS]:
        return []
    return tokens


def select_columns(
    requested: str | Sequence[ColumnRef] | None,
    available: Sequence[str],
) -> list[int]:
    """Resolve requested columns to indices into ``available``.

    Names match case-insensitively; integers and digit strings are 1-based
    positions. Duplicates keep the position of their first occurrence.

    Args:
        requested: Column names or positions, or a comma-separated string.
            Empty or None selects every column in its original order.
        available: Names of the table's columns, in native order.

    Returns:
        Indices into ``available`` in requested order.

    Raises:
        UnknownColumn: If a token matches no column.
    """
    if not available:
        return []
    if isinstance(requested, str):
        requested = parse_columns(requested)
    if not requested:
        return list(range(len(available)))

    by_name: dict[str, int] = {}
    for index, name in enumerate(available):
        by_name.setdefault(name.lower(), index)

    selected: list[int] = []
    for token in requested:
        index = _resolve(token, by_name, len(available))
        if index not in selected:
            selected.append(index)
    return selected


def _resolve(token: ColumnRef, by_name: dict[str, int], count: int) -> int:
    """Resolve one token to a column index."""
    if isinstance(token, int):
        if 1 <= token <= count:
            return token - 1
        raise UnknownColumn(str(token))

    key = token.strip().lower()
    if key in by_name:
        return by_name[key]
    if key.isdigit():
        position = int(key)
        if 1 <= position <= count:
            return position - 1
    raise UnknownColumn(token)
