from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


_PACKAGE_LOGGER = "fakturka"
_LOG_FILE_NAME = "fakturka.log"
_MAX_LOG_BYTES = 1024 * 1024
_BACKUP_COUNT = 3
_FILE_HANDLER = "fakturka-file"
_CONSOLE_HANDLER = "fakturka-console"


def _handler(logger: logging.Logger, name: str) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(log_dir: Path | str, *, debug: bool = False) -> logging.Logger:
    """Attach console and file handlers to the ``fakturka`` logger.

    The log file lives next to the database. Calling this again only adjusts
    the level, or moves the file handler when ``log_dir`` changed.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)

    log_file = Path(log_dir) / _LOG_FILE_NAME
    file_handler = _handler(logger, _FILE_HANDLER)
    if file_handler is not None and file_handler.baseFilename != os.path.abspath(log_file):
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None

    if file_handler is None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        logger.addHandler(file_handler)

    if _handler(logger, _CONSOLE_HANDLER) is None:
        console = logging.StreamHandler(sys.stderr)
        console.set_name(_CONSOLE_HANDLER)
        console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        console.setLevel(logging.WARNING)
        logger.addHandler(console)

    file_handler.setLevel(level)
    return logger
