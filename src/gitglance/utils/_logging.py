"""Structured logging for gitglance commands.

Each logger is a standalone structlog logger bound to one file. The global
structlog configuration is never modified, so embedding gitglance leaves the
host application's logging alone.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_cli_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

DEBUG_ENV = "GITGLANCE_DEBUG"


def resolve_log_level(level: str) -> int:
    """Map a configured level name to a ``logging`` level.

    ``GITGLANCE_DEBUG`` forces DEBUG. Unknown names fall back to INFO.
    """
    if os.environ.get(DEBUG_ENV):
        return logging.DEBUG
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def _processors(log_format: LogFormatType) -> "list[Processor]":
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def open_file_logger(
    log_file: Path | str,
    *,
    level: int = logging.INFO,
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":
    """Open a logger that appends one rendered line per event to ``log_file``.

    Missing parent directories are created.
    """
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLogger(path.open("a", encoding="utf-8")),
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
) -> "FilteringBoundLogger":
    """Create the logger for one CLI invocation.

    Args:
        level: Configured level name (debug, info, warning, error).
        log_format: ``json`` or ``text``.
        log_file: Log file path, the platform log directory when empty.
        command: Command name bound to every event.

    Returns:
        The logger; repository events (``repo_status``, ``repo_skipped``,
        ``fetch_failed``, ``batch_complete``) are written through it.
    """
    logger = open_file_logger(
        log_file or get_cli_log_file(),
        level=resolve_log_level(level),
        log_format=log_format,
    )
    if command:
        return logger.bind(command=command)
    return logger
