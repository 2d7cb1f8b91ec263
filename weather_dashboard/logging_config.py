"""Logging for the Weather Dashboard.

Every record is written twice: as one JSON object per line to a rotating
dashboard.log (for grepping lookups by city or event_type) and as a short
human-readable line on stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger.json import JsonFormatter

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "dashboard.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Provider traffic is logged by our own httpx event hooks, with the key redacted
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _json_file_handler(log_dir: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"service": "weather-dashboard"},
            timestamp=True,
        )
    )
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Install the JSON file handler and the console handler on the root logger.

    Any handlers already on the root logger are replaced, so calling this
    twice does not duplicate output.

    Args:
        log_level: Console and root level name (DEBUG, INFO, ...)
        log_dir: Directory for dashboard.log; defaults to logs/ at the repo root

    Returns:
        The root logger
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_json_file_handler(log_dir))
    root_logger.addHandler(_console_handler(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with structured fields (city, status_code, event_type, ...).

    The fields become top-level keys in the JSON log line.
    """
    logger.log(logging.getLevelName(level.upper()), message, extra=extra_fields)
