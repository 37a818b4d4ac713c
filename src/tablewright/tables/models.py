"""Value types describing table columns and styles.

All models are frozen: a ``TableStyle`` may be shared between tables, and
builders derive new styles with ``TableStyle.evolve`` instead of mutating them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from tablewright.tables.errors import InvalidStyle


class WrapPolicy(StrEnum):
    """How a cell wider than its column is rendered."""

    WRAP = "wrap"
    TRUNCATE = "truncate"


class Alignment(StrEnum):
    """Horizontal alignment of cell content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class BorderStyle(StrEnum):
    """Available border styles for CLI tables."""

    MODERN = "modern"
    BORDERLESS = "borderless"
    MARKDOWN = "markdown"
    SHARP = "sharp"
    ASCII = "ascii"
    PSQL = "psql"
    DOTS = "dots"


class Column(BaseModel):
    """A table column.

    Attributes:
        name: Column label, rendered in the header row and used for selection.
        width: Explicit content width. Hinted columns are never shrunk.
        wrap: Overflow policy for this column; None uses the table default.
        align: Horizontal alignment of the column's cells.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    width: int | None = None
    wrap: WrapPolicy | None = None
    align: Alignment = Alignment.LEFT

    @model_validator(mode="after")
    def validate_width(self) -> Self:
        """Reject negative hints and wrapping into a zero-width column."""
        if self.width is not None:
            if self.width < 0:
                raise InvalidStyle(f"column {self.name!r} has negative width {self.width}")
            if self.width == 0 and self.wrap == WrapPolicy.WRAP:
                raise InvalidStyle(f"column {self.name!r} cannot wrap at zero width")
        return self


class Padding(BaseModel):
    """Cell padding, in characters (left/right) and lines (top/bottom)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    left: int = 1
    right: int = 1
    top: int = 0
    bottom: int = 0

    @model_validator(mode="after")
    def validate_non_negative(self) -> Self:
        """Padding values must not be negative."""
        for side in ("left", "right", "top", "bottom"):
            value = getattr(self, side)
            if value < 0:
                raise InvalidStyle(f"{side} padding must not be negative, got {value}")
        return self

    @classmethod
    def uniform(cls, n: int) -> Padding:
        """Pad left and right by ``n`` characters, no vertical padding."""
        return cls(left=n, right=n)

    @property
    def horizontal(self) -> int:
        return self.left + self.right


class TableStyle(BaseModel):
    """Rendering configuration for a table.

    Attributes:
        border: Border characters to draw with.
        padding: Cell padding applied to every column.
        max_width: Upper bound on the total rendered width.
        wrap_policy: Default overflow policy for columns without their own.
        newline_separator: Replacement for embedded newlines. None keeps
            newlines as hard line breaks inside the cell.
        ellipsis: Marker appended to truncated content.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    border: BorderStyle = BorderStyle.MODERN
    padding: Padding = Field(default_factory=Padding)
    max_width: int | None = None
    wrap_policy: WrapPolicy = WrapPolicy.WRAP
    newline_separator: str | None = None
    ellipsis: str = "..."

    @model_validator(mode="after")
    def validate_consistency(self) -> Self:
        """Reject contradictory settings."""
        if self.max_width is not None and self.max_width <= 0:
            raise InvalidStyle(f"max_width must be positive, got {self.max_width}")
        if not self.ellipsis:
            raise InvalidStyle("ellipsis marker must not be empty")
        if self.newline_separator is not None and "\n" in self.newline_separator:
            raise InvalidStyle("newline separator must not contain a newline")
        return self

    def policy_for(self, column: Column) -> WrapPolicy:
        """Return the effective overflow policy of ``column``."""
        return column.wrap or self.wrap_policy

    def evolve(self, **changes: Any) -> TableStyle:
        """Return a validated copy of this style with ``changes`` applied.

        Raises:
            InvalidStyle: If the resulting style is not valid.
        """
        try:
            return TableStyle.model_validate({**dict(self), **changes})
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise InvalidStyle(f"{field}: {error['msg']}") from e
