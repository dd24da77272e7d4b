"""Console + rotating file logging for the ncl_scraper logger."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Union

LOGGER_NAME = "ncl_scraper"
LOG_FILE = "scraper.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def setup_logger(log_dir: str = "logs", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach console and file handlers once; later calls only change the level.

    ``level`` may be a number or a level name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    logger.addHandler(console)

    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        logger.warning(f"Cannot create log directory {log_dir}: {e}; logging to console only")
        return logger

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)

    return logger
