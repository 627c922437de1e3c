"""Opt-in diagnostic logging.

The TUI owns the terminal, so records never go to stderr. Setting
``VIMBO_LOG`` to a level name enables a file handler; ``VIMBO_LOG_FILE``
overrides the default location under the user log directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_LEVEL_ENV = "VIMBO_LOG"
LOG_FILE_ENV = "VIMBO_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


def configure_logging(environ: dict[str, str] | None = None) -> Path | None:
    """Attach a file handler to the package logger when enabled.

    Returns the log file path, or ``None`` when logging stays disabled
    (unset or unknown level name).
    """
    env = os.environ if environ is None else environ
    level_name = env.get(LOG_LEVEL_ENV, "").strip().upper()
    if not level_name:
        return None
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        return None

    log_path = Path(env.get(LOG_FILE_ENV) or default_log_path())
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("vimbo")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return log_path
