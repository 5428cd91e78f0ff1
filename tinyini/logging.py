"""
Logging setup for tinyini.

Library modules only ask for loggers through get_logger() and never install
handlers. The command-line front end calls setup_logging() once, which sends
diagnostics to stderr (colored by level on a terminal) and, on request, to a
rotating log file.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path

ROOT_LOGGER = "tinyini"

_RESET = "\033[0m"

# ANSI colors for the level column
LEVEL_COLORS = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;91m",
}


class LevelFormatter(logging.Formatter):
    """
    Formatter with a fixed-width level column.

    With colors=True the level name is wrapped in the ANSI color of its
    level. The record passed to format() is left untouched so other
    handlers see the original values.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        colors: bool = False,
    ):
        super().__init__(fmt, datefmt)
        self.colors = colors

    def format(self, record: logging.LogRecord) -> str:
        shown = logging.makeLogRecord(record.__dict__)
        shown.levelname = f"{record.levelname:8}"
        if self.colors and record.levelno in LEVEL_COLORS:
            shown.levelname = f"{LEVEL_COLORS[record.levelno]}{shown.levelname}{_RESET}"
        return super().format(shown)


@dataclass
class LogConfig:
    """Where diagnostics go and how much of them."""

    console_level: str = "WARNING"
    console_colors: bool = True

    # No file output unless a path is set
    log_file: str | None = None
    file_level: str = "DEBUG"
    file_max_bytes: int = 1024 * 1024
    file_backup_count: int = 3

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(name: str) -> int:
    """Map a level name such as "debug" or "warn" to its number (INFO if unknown)."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(config: LogConfig) -> logging.Handler:
    # stdout carries query results, so diagnostics go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(get_log_level(config.console_level))
    colors = config.console_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    handler.setFormatter(LevelFormatter(config.format, config.date_format, colors=colors))
    return handler


def _file_handler(config: LogConfig) -> logging.Handler:
    path = Path(config.log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=config.file_max_bytes,
        backupCount=config.file_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(get_log_level(config.file_level))
    handler.setFormatter(LevelFormatter(config.format, config.date_format))
    return handler


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Install handlers on the tinyini logger, replacing any from an earlier call.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    config = config or LogConfig()

    logger = logging.getLogger(ROOT_LOGGER)
    # Handlers do the filtering
    logger.setLevel(logging.DEBUG)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    logger.addHandler(_console_handler(config))
    if config.log_file:
        logger.addHandler(_file_handler(config))

    # chardet logs every candidate encoding at DEBUG
    logging.getLogger("chardet").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a tinyini component, e.g. "parser" -> tinyini.parser."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
