# chatificial/utils/logger.py

import logging
import os
import sys
from pathlib import Path
from platformdirs import user_log_dir

from chatificial.config import APP_NAME, APP_AUTHOR

DEBUG_ENV_VAR = "CHATIFICIAL_DEBUG"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _has_handler(lg: logging.Logger, kind: type, stream=None) -> bool:
    return any(
        type(h) is kind and (stream is None or getattr(h, "stream", None) is stream)
        for h in lg.handlers
    )


def setup_logger(console_level: int | None = None) -> logging.Logger:
    """
    Configure the application logger.

    Silent unless CHATIFICIAL_DEBUG is set (records then go to the user log
    dir) or ``console_level`` is given (records are mirrored to stderr).
    Safe to call repeatedly; handlers are only added once.
    """
    lg = logging.getLogger(APP_NAME)
    lg.propagate = False
    levels = []

    if os.environ.get(DEBUG_ENV_VAR):
        levels.append(logging.INFO)
        if not _has_handler(lg, logging.FileHandler):
            log_dir = Path(user_log_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
            log_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_dir / "app.debug.log", encoding="utf-8")
            fh.setLevel(logging.INFO)
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            lg.addHandler(fh)

    if console_level is not None:
        levels.append(console_level)
        if not _has_handler(lg, logging.StreamHandler, sys.stderr):
            sh = logging.StreamHandler(sys.stderr)
            sh.setLevel(console_level)
            sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
            lg.addHandler(sh)

    if levels:
        lg.setLevel(min(levels))
    else:
        lg.setLevel(logging.CRITICAL)
        if not _has_handler(lg, logging.NullHandler):
            lg.addHandler(logging.NullHandler())
    return lg


def enable_console_logging(level: int = logging.DEBUG) -> None:
    """Mirror log records to stderr (used by the CLI's --verbose)."""
    setup_logger(console_level=level)


logger = setup_logger()
