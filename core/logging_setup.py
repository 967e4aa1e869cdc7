# core/logging_setup.py

"""
Logging configuration for the Tutorbook CLI.

`setup_logging()` is called once from the CLI entry point. Library modules only
ever call `get_logger()`, so importing the models never touches the filesystem.
"""

from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from core.settings import (
    APP_NAME,
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    LOG_PATH,
)

SESSION_ID = uuid.uuid4().hex[:8]


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{APP_NAME}.{name}")


def setup_logging() -> logging.Logger:
    """
    Attaches a rotating file handler and a console handler to the application logger.

    Returns:
        The configured application logger.

    Notes:
        - Idempotent: calling it again returns the logger without adding handlers.
        - The file handler records everything at DEBUG; the console handler uses `LOG_LEVEL`.
    """
    logger = logging.getLogger(APP_NAME)

    if logger.handlers:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
    )
    session_filter = EnsureSessionFilter()

    fh = RotatingFileHandler(
        LOG_PATH,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(LOG_LEVEL)
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)

    logger.addHandler(fh)
    logger.addHandler(ch)

    logger.info("Logging initialized. log_file=%s", LOG_PATH)
    return logger


def install_global_exception_hooks() -> None:
    logger = logging.getLogger(APP_NAME)

    def _excepthook(exc_type, exc, tb):
        logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
