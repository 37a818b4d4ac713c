"""Configuration management with Pydantic validation."""

from tablewright.core.config.models import (
    CONFIG_DIR,
    CONFIG_FILE,
    OutputConfig,
    TableDefaults,
    ToolkitConfig,
    load_config,
    load_raw_config,
)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "OutputConfig",
    "TableDefaults",
    "ToolkitConfig",
    "load_config",
    "load_raw_config",
]
