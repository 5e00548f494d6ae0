from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import get_settings

PACKAGE_LOGGER = "event_calendar"
FILE_HANDLER_NAME = "event-calendar-file"
CONSOLE_HANDLER_NAME = "event-calendar-console"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _installed_file(logger: logging.Logger) -> Optional[Path]:
    for handler in logger.handlers:
        if handler.get_name() == FILE_HANDLER_NAME and isinstance(handler, RotatingFileHandler):
            return Path(handler.baseFilename)
    return None


def configure_logging(level: Optional[str] = None, *, log_path: Optional[Path] = None) -> Path:
    """Route ``event_calendar.*`` records to a rotating log file and the console.

    Handlers are attached once; later calls only adjust the level. Returns the
    file that receives the records.
    """

    settings = get_settings().logging
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, (level or settings.level).upper(), logging.INFO))

    existing = _installed_file(logger)
    if existing is not None:
        return existing

    log_file = log_path or settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.debug("Logging configured. Output file: %s", log_file)
    return log_file


__all__ = ["configure_logging"]
