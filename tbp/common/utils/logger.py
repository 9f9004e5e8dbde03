"""Logging for tbp.

Library modules log to the `app.*` tree and attach no handlers of their own.
`setup_logging` wires up the console and file output; the CLI calls it.
"""

import logging
import os
import sys
from typing import Any

NOTICE_LEVEL = 25
logging.addLevelName(NOTICE_LEVEL, "NOTICE")

LOGGER_NAME = "app"

RESET = "\033[0m"
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "NOTICE": "\033[38;5;33m",  # Blue-ish
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[1;41m",  # White on red
}

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Colors the level name on a terminal, without touching the record other handlers see."""

    def format(self, record: logging.LogRecord) -> str:
        if not sys.stderr.isatty():
            return super().format(record)
        levelname = record.levelname
        color = COLORS.get(levelname, "")
        record.levelname = f"{color}{levelname:<7}{RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


# info() is promoted to NOTICE so progress messages reach the console
class CustomLogger(logging.Logger):
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        super().log(NOTICE_LEVEL, msg, *args, **kwargs)


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the `app` tree, created as a `CustomLogger`."""
    name = name or LOGGER_NAME
    manager = logging.Logger.manager
    existing = manager.loggerDict.get(name)
    if isinstance(existing, logging.Logger):
        return existing
    # setLoggerClass is process wide, so only the app tree is switched over
    previous = manager.loggerClass or logging.getLoggerClass()
    manager.setLoggerClass(CustomLogger)
    try:
        return logging.getLogger(name)
    finally:
        manager.setLoggerClass(previous)


def setup_logging(log_dir: str | None = None, console_level: int = NOTICE_LEVEL) -> logging.Logger:
    """Attach console and file handlers to the `app` logger.

    The file handler writes DEBUG and up to `<log_dir>/app.log`; `log_dir`
    defaults to `TBP_LOG_DIR`, then `./logs`. Calling it again replaces the
    handlers instead of stacking them.
    """
    app_logger = get_logger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)
    app_logger.propagate = False

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)  # stdout carries command output
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    app_logger.addHandler(console_handler)

    log_dir = log_dir or os.environ.get("TBP_LOG_DIR") or os.path.join(os.getcwd(), "logs")
    os.makedirs(log_dir, exist_ok=True)
    file_handler = logging.FileHandler(os.path.join(log_dir, "app.log"), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    app_logger.addHandler(file_handler)

    app_logger.debug("Logger initialized successfully.")
    return app_logger


logger = get_logger(LOGGER_NAME)
