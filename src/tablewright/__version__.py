"""Version information for tablewright."""

__version__ = "0.4.0"
