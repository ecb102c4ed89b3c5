"""Opt-in logging setup for movingaverage.

The library never configures logging on import: the ``movingaverage``
logger carries only a NullHandler. Applications that want to see the
DEBUG trail of period changes and resets call one of the helpers below.

Example usage:
    import movingaverage

    movingaverage.enable_console_logging(level="DEBUG")
    movingaverage.enable_file_logging("logs/averages.log", max_bytes=5_000_000)
    movingaverage.enable_json_logging()
    movingaverage.configure_from_env()

Environment variables (read by configure_from_env only):
    MA_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    MA_LOG_FILE: Path to a rotating log file
    MA_LOG_JSON: "1" to emit JSON lines instead of plain text
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "movingaverage"

ENV_LEVEL = "MA_LOGGING"
ENV_FILE = "MA_LOG_FILE"
ENV_JSON = "MA_LOG_JSON"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Example output:
        {"timestamp": "2026-01-15T10:30:00.123456+00:00", "level": "DEBUG",
         "logger": "movingaverage.moving_average", "message": "Moving average reset (period=10)"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra"):
            log_data["extra"] = record.extra
        return json.dumps(log_data)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Detach and close every handler except NullHandlers."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _install(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _prepare_path(path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Log to stderr.

    Args:
        level: Log level name or numeric level.
        format: Record format string.
        date_format: Format for ``%(asctime)s``.

    Returns:
        The installed StreamHandler.
    """
    handler = logging.StreamHandler()
    _install(handler, level, logging.Formatter(format, date_format))
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    json_format: bool = False,
) -> RotatingFileHandler:
    """Log to a size-rotated file. Parent directories are created.

    With ``json_format=True`` each record is written as one JSON line and
    ``format``/``date_format`` are ignored.

    Returns:
        The installed RotatingFileHandler.
    """
    handler = RotatingFileHandler(_prepare_path(path), maxBytes=max_bytes, backupCount=backup_count)
    formatter = JsonFormatter() if json_format else logging.Formatter(format, date_format)
    _install(handler, level, formatter)
    return handler


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log JSON lines to stderr."""
    handler = logging.StreamHandler()
    _install(handler, level, JsonFormatter())
    return handler


def configure_from_env() -> None:
    """Configure logging from MA_LOGGING, MA_LOG_FILE and MA_LOG_JSON.

    Does nothing when neither MA_LOGGING nor MA_LOG_FILE is set.
    """
    level = os.environ.get(ENV_LEVEL, "").upper()
    log_file = os.environ.get(ENV_FILE, "")
    use_json = os.environ.get(ENV_JSON, "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if log_file:
        enable_file_logging(log_file, level=level, json_format=use_json)
    elif use_json:
        enable_json_logging(level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the package logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level of one submodule logger, e.g. ``"moving_average"``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the package logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
