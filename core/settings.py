# core/settings.py

"""
Program-wide settings.

Values are module constants. The log directory and console log level can be
overridden through the environment (`TUTORBOOK_LOG_DIR`, `TUTORBOOK_LOG_LEVEL`).
"""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "tutorbook"

LOG_DIR = Path(
    os.environ.get("TUTORBOOK_LOG_DIR", Path.home() / f".{APP_NAME}" / "logs")
)
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
LOG_LEVEL = os.environ.get("TUTORBOOK_LOG_LEVEL", "WARNING").upper()

LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUP_COUNT = 5
