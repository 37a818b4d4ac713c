"""Border characters for each table style.

Border glyphs are described with Rich's ``Box`` format (eight lines of four
characters: top, head, head separator, mid, row separator, foot separator,
foot, bottom). Styles Rich already ships are reused; psql, dots and
borderless are defined here.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from rich import box
from rich.box import Box

from tablewright.tables.models import BorderStyle

PSQL = Box(
    "\n".join(
        [
            "    ",
            "  | ",
            " -+ ",
            "  | ",
            " -+ ",
            " -+ ",
            "  | ",
            "    ",
        ]
    )
)

DOTS = Box(
    "\n".join(
        [
            "....",
            ": ::",
            ":.::",
            ": ::",
            ":.::",
            ":.::",
            ": ::",
            ":.::",
        ]
    )
)

BLANK = Box("\n".join(["    "] * 8))


@dataclass(frozen=True)
class Frame:
    """Border glyphs plus whether the outer left/right edges are drawn."""

    box: Box
    edges: bool = True

    def overhead(self, column_count: int) -> int:
        """Characters used by borders on one physical line."""
        if column_count <= 0:
            return 2 if self.edges else 0
        dividers = column_count - 1
        return dividers + (2 if self.edges else 0)

    def content_line(self, cells: Sequence[str], level: Literal["head", "body"]) -> str:
        """Join already padded cell text with vertical borders."""
        if level == "head":
            left, vertical, right = self.box.head_left, self.box.head_vertical, self.box.head_right
        else:
            left, vertical, right = self.box.mid_left, self.box.mid_vertical, self.box.mid_right
        line = vertical.join(cells)
        if self.edges:
            line = f"{left}{line}{right}"
        return line

    def top(self, widths: Sequence[int]) -> str:
        return self.box.get_top(widths)

    def separator(self, widths: Sequence[int]) -> str:
        """Horizontal rule drawn under the header or panel row."""
        return self.box.get_row(widths, "head", edge=self.edges)

    def panel_separator(self, widths: Sequence[int]) -> str:
        """Rule under a spanning panel row, where the column dividers begin.

        Dividers open downwards like the top rule's. Styles whose top rule is
        blank fall back to the header cross.
        """
        b = self.box
        divider = b.top_divider if b.top_divider.strip() else b.head_row_cross
        line = divider.join(b.head_row_horizontal * width for width in widths)
        if self.edges:
            line = f"{b.head_row_left}{line}{b.head_row_right}"
        return line

    def bottom(self, widths: Sequence[int]) -> str:
        return self.box.get_bottom(widths)


FRAMES: dict[BorderStyle, Frame] = {
    BorderStyle.MODERN: Frame(box.ROUNDED),
    BorderStyle.BORDERLESS: Frame(BLANK, edges=False),
    BorderStyle.MARKDOWN: Frame(box.MARKDOWN),
    BorderStyle.SHARP: Frame(box.SQUARE),
    BorderStyle.ASCII: Frame(box.ASCII),
    BorderStyle.PSQL: Frame(PSQL, edges=False),
    BorderStyle.DOTS: Frame(DOTS),
}


def frame_for(style: BorderStyle) -> Frame:
    """Return the frame used to draw ``style``."""
    return FRAMES[style]
