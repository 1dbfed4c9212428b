# -*- coding: utf-8 -*-
"""
Logging configuration.

One "projects" logger writes everything to a rotating file under
Config.LOGS_DIR and echoes Config.LOG_CONSOLE_LEVEL and above to stdout.
Modules ask for a child logger with get_logger(__name__).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "projects"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _file_handler(log_path: Path, max_bytes: int, backup_count: int) -> logging.Handler:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler(level_name: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger(log_path: Optional[Path] = None, console_level: Optional[str] = None) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        log_path: Log file location (defaults to Config.LOG_PATH)
        console_level: Level name for stdout output (defaults to Config.LOG_CONSOLE_LEVEL)

    Calling it again replaces the handlers, so it is safe to reconfigure.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_file_handler(
        Path(log_path) if log_path else Config.LOG_PATH,
        Config.LOG_MAX_BYTES,
        Config.LOG_BACKUP_COUNT,
    ))
    logger.addHandler(_console_handler(console_level or Config.LOG_CONSOLE_LEVEL))

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, configuring it on first use."""
    if _logger is None:
        setup_logger()
    return _logger.getChild(name)
