"""String measuring and truncation helpers.

Widths are terminal cells, not code points: wide CJK characters and emoji
count as two cells. Measurement is delegated to ``rich.cells`` so tables and
Rich-rendered output agree on what fits.
"""

from __future__ import annotations

from rich.cells import cell_len, set_cell_size

from tablewright.tables.models import Alignment

DEFAULT_TRUNCATION_SUFFIX = "..."


def cell_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies."""
    return cell_len(text)


def fit(text: str, width: int, align: Alignment = Alignment.LEFT) -> str:
    """Pad ``text`` to exactly ``width`` cells, cropping if it is wider.

    Args:
        text: A single physical line.
        width: Target width in cells.
        align: Where the padding goes.

    Returns:
        A string occupying exactly ``width`` cells.
    """
    if width <= 0:
        return ""
    gap = width - cell_len(text)
    if gap <= 0:
        return set_cell_size(text, width)
    if align == Alignment.RIGHT:
        return " " * gap + text
    if align == Alignment.CENTER:
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


def truncate_string(s: str, max_width: int) -> str:
    """Truncate ``s`` to ``max_width`` cells, appending ``"..."`` when cut.

    Example:
        >>> truncate_string("Hello", 10)
        'Hello'
        >>> truncate_string("Hello, World!", 8)
        'Hello...'
    """
    return truncate_with_suffix(s, max_width, DEFAULT_TRUNCATION_SUFFIX)


def truncate_with_suffix(s: str, max_width: int, suffix: str) -> str:
    """Truncate ``s`` with a custom suffix.

    The result, suffix included, never exceeds ``max_width`` cells. When the
    suffix alone does not fit it is cut down to ``max_width``.

    Example:
        >>> truncate_with_suffix("Hello, World!", 8, "…")
        'Hello, …'
    """
    if max_width <= 0:
        return ""
    if cell_len(s) <= max_width:
        return s

    suffix_width = cell_len(suffix)
    if suffix_width >= max_width:
        return set_cell_size(suffix, max_width)
    return set_cell_size(s, max_width - suffix_width) + suffix


def truncate_middle(s: str, max_width: int) -> str:
    """Truncate ``s`` in the middle, keeping its start and end.

    Useful for file paths and long identifiers where both ends matter. The
    start keeps the extra cell when the remaining width is odd.

    Example:
        >>> truncate_middle("/very/long/path/to/file.txt", 20)
        '/very/lon...file.txt'
    """
    if cell_len(s) <= max_width:
        return s
    marker = DEFAULT_TRUNCATION_SUFFIX
    if max_width <= cell_len(marker):
        return marker[: max(max_width, 0)]

    available = max_width - cell_len(marker)
    start_width = (available + 1) // 2
    end_width = available // 2
    return set_cell_size(s, start_width) + marker + _tail(s, end_width)


def _tail(s: str, width: int) -> str:
    """Return the longest suffix of ``s`` that fits in ``width`` cells."""
    taken = 0
    index = len(s)
    while index > 0:
        char_width = cell_len(s[index - 1])
        if taken + char_width > width:
            break
        taken += char_width
        index -= 1
    return s[index:]
