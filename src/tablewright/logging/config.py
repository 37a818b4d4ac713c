"""Structured logging configuration using structlog.

Log records go to stderr so they never interleave with tables printed on
stdout. The table core itself never logs; the CLI, the config loader and the
terminal width provider do.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog

LOG_DIR = Path.home() / ".local" / "state" / "tablewright"
LOG_FILE = LOG_DIR / "tablewright.log"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3
RETENTION_DAYS = 30

# Marks handlers installed here so a second configure_logging() replaces them
_HANDLER_TAG = "_tablewright_handler"

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _cleanup_old_logs(log_file: Path) -> None:
    """Delete rotated copies of ``log_file`` older than RETENTION_DAYS."""
    if not log_file.parent.exists():
        return
    cutoff = datetime.now() - timedelta(days=RETENTION_DAYS)
    for rotated in log_file.parent.glob(f"{log_file.name}.*"):
        try:
            if datetime.fromtimestamp(rotated.stat().st_mtime) < cutoff:
                rotated.unlink()
        except OSError:
            pass  # another process may have rotated it away


def _file_handler(log_file: Path) -> logging.Handler:
    """Create a rotating JSON file handler capturing every level."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    _cleanup_old_logs(log_file)

    handler = RotatingFileHandler(log_file, maxBytes=MAX_LOG_SIZE, backupCount=BACKUP_COUNT)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=SHARED_PROCESSORS,
        )
    )
    return handler


def _console_handler(level: int, json_output: bool, colors: bool, debug: bool) -> logging.Handler:
    """Create the stderr handler, human readable unless ``json_output``."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=colors,
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=debug),
        )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=SHARED_PROCESSORS)
    )
    return handler


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
    json_output: bool = False,
    colors: bool = True,
    log_to_file: bool = True,
    log_file: Path | None = None,
) -> None:
    """Configure structured logging for the CLI.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        verbose: Show INFO messages on stderr.
        debug: Show DEBUG messages on stderr, with locals in tracebacks.
        json_output: Render stderr records as JSON lines.
        colors: Allow ANSI colors in human-readable records.
        log_to_file: Also write every record to a rotating JSON log file.
        log_file: Path of that file. Defaults to ``LOG_FILE``.
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if log_to_file else level
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # handlers filter
    for handler in [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]:
        root.removeHandler(handler)
        handler.close()

    handlers = [_console_handler(level, json_output, colors, debug)]
    if log_to_file:
        handlers.append(_file_handler(log_file or LOG_FILE))
    for handler in handlers:
        setattr(handler, _HANDLER_TAG, True)
        root.addHandler(handler)


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Get a logger with optional initial context.

    Args:
        name: Logger name. If None, structlog picks the calling module.
        **initial_context: Key-value pairs bound to every record.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
