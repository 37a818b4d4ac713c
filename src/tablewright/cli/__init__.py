"""Command-line interface for tablewright."""
