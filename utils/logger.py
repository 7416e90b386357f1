# -*- coding: utf-8 -*-
"""
Logging configuration.

All survey modules log under the Config.LOGGER_NAME hierarchy; levels,
formats and the rotating file location come from Config (and .env).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level name ("info", "WARNING") or number into a logging level.

    Raises:
        ValueError: If the name is not a logging level
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logger(log_path: Optional[Path] = None,
                 level: Optional[Union[int, str]] = None,
                 console: bool = True) -> logging.Logger:
    """
    Setup the survey logger with a rotating file handler and optional console output.

    Calling it again replaces (and closes) the handlers of the previous setup,
    so module loggers obtained earlier follow the new configuration.

    Args:
        log_path: Log file; defaults to Config.LOG_PATH
        level: File log level; defaults to Config.LOG_LEVEL
        console: Also log to stdout at Config.CONSOLE_LOG_LEVEL
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    file_level = resolve_level(level if level is not None else Config.LOG_LEVEL)
    console_level = resolve_level(Config.CONSOLE_LOG_LEVEL)

    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(Config.LOGGER_NAME)
    logger.setLevel(min(file_level, console_level) if console else file_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt=Config.LOG_DATE_FORMAT))
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(Config.CONSOLE_LOG_FORMAT))
        logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
