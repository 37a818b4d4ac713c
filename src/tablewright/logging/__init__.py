"""Logging configuration for tablewright."""

from tablewright.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
