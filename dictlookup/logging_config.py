"""Logging setup shared by the API server and the CLI."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TextIO

from dictlookup.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)

# Both log every outbound request at INFO/DEBUG
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name overriding ``settings.log_level``
        stream: Console stream, stderr by default so that ``lookup --json``
            keeps stdout to the JSON document alone
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, (level or settings.log_level).upper()))

    # Remove existing handlers to avoid duplicates on reload
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if settings.log_file_enabled:
        log_path = settings.resolved_log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=settings.log_file_max_bytes,
            backupCount=settings.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
        root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
