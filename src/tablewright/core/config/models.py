"""Configuration models for tablewright.

Defaults for table rendering live in ``~/.config/tablewright/config.yaml``
and are validated with Pydantic. The loaded configuration is passed
explicitly to the code that renders tables; nothing reads it globally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tablewright.tables.models import BorderStyle, Padding, TableStyle, WrapPolicy
from tablewright.tables.terminal import DEFAULT_TERMINAL_WIDTH

logger = structlog.get_logger()

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "tablewright"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

CONFIG_HEADER = """\
# tablewright configuration
#
# table:  defaults applied to every rendered table
# output: terminal and color settings
"""


class TableDefaults(BaseModel):
    """Default table style.

    Attributes:
        border: Border style name.
        wrap_policy: Overflow policy for columns without their own.
        padding: Spaces on each side of a cell.
        newline_separator: Replacement for newlines in cells, or None to keep them.
        ellipsis: Marker appended to truncated cells.
        max_width: Upper bound on table width, or None for the terminal width.
    """

    model_config = ConfigDict(extra="forbid")

    border: BorderStyle = BorderStyle.MODERN
    wrap_policy: WrapPolicy = WrapPolicy.WRAP
    padding: int = Field(default=1, ge=0)
    newline_separator: str | None = None
    ellipsis: str = "..."
    max_width: int | None = Field(default=None, gt=0)

    def to_style(self) -> TableStyle:
        """Build the ``TableStyle`` these defaults describe."""
        return TableStyle(
            border=self.border,
            padding=Padding.uniform(self.padding),
            max_width=self.max_width,
            wrap_policy=self.wrap_policy,
            newline_separator=self.newline_separator,
            ellipsis=self.ellipsis,
        )


class OutputConfig(BaseModel):
    """Terminal output settings.

    Attributes:
        color: Allow colored output when the terminal supports it.
        width_utilization: Fraction of the terminal width tables may use.
        fallback_width: Width used when output is not a terminal.
    """

    model_config = ConfigDict(extra="forbid")

    color: bool = True
    width_utilization: float = 1.0
    fallback_width: int = DEFAULT_TERMINAL_WIDTH

    @field_validator("width_utilization")
    @classmethod
    def validate_utilization(cls, v: float) -> float:
        """Validate utilization is within (0, 1]."""
        if not 0 < v <= 1:
            raise ValueError("width_utilization must be greater than 0 and at most 1")
        return v

    @field_validator("fallback_width")
    @classmethod
    def validate_fallback_width(cls, v: int) -> int:
        """Validate fallback width is positive."""
        if v <= 0:
            raise ValueError("fallback_width must be positive")
        return v


class ToolkitConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"
    table: TableDefaults = Field(default_factory=TableDefaults)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def to_yaml(self) -> str:
        """Serialize to YAML with a comment header."""
        data = self.model_dump(mode="json")
        return CONFIG_HEADER + "\n" + yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def load_raw_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config file as a plain dict, without validation.

    Returns an empty dict when the file is missing or is not valid YAML.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return {}
    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        logger.warning("Ignoring unreadable config file", path=str(config_path), error=str(e))
        return {}
    return data if isinstance(data, dict) else {}


def load_config(path: Path | None = None) -> ToolkitConfig | None:
    """Load and validate the config file.

    Args:
        path: Config file to read. Defaults to ``CONFIG_FILE``.

    Returns:
        The validated configuration, or None if the file does not exist.

    Raises:
        ValueError: If the file is not valid YAML.
        pydantic.ValidationError: If the content does not match the schema.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        logger.debug("No config file found", path=str(config_path))
        return None

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    config = ToolkitConfig.model_validate(data or {})
    logger.debug("Loaded config", path=str(config_path), border=config.table.border.value)
    return config
