"""Logging configuration for conman.

Provides centralized logging setup with file and console handlers.
The log file is kept in the application's config directory and rotated,
since the command line mode is typically run on every game launch.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config.paths import GamePaths

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3


def setup_logging(
    debug: bool = False,
    console: bool = False,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure application-wide logging.

    Always logs to a file. Console output is added in debug mode or when
    requested (command line runs without the GUI report to the console).

    Args:
        debug: If True, log to console at DEBUG level
        console: If True, log to console at INFO level
        log_file: Optional log file path, defaults to conman.log in the config dir

    Returns:
        The root logger for the application
    """
    if log_file is None:
        log_file = GamePaths.LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("conman")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # File handler - always logs DEBUG and above
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    if debug or console:
        console_handler = logging.StreamHandler(sys.stdout)
        if debug:
            console_handler.setLevel(logging.DEBUG)
            console_handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
        else:
            # Plain messages for command line use
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger, e.g. get_logger("handler") -> conman.handler"""
    return logging.getLogger(f"conman.{name}")
