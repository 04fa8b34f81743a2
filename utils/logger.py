# -*- coding: utf-8 -*-
"""
Logging configuration.

All module loggers are children of the "servicedesk" logger, which writes a
rotating DEBUG log file and a shorter console stream.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "servicedesk"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def setup_logger(log_path: Optional[Path] = None,
                 console_level: Optional[str] = None) -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Args:
        log_path: Log file; defaults to Config.LOG_PATH
        console_level: Level name for the console; defaults to Config.CONSOLE_LOG_LEVEL
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)
    console_level = (console_level or Config.CONSOLE_LOG_LEVEL).upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Re-running setup replaces the handlers
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level, logging.INFO))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module, configuring logging on first use.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
