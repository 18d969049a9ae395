"""Logging setup for crawltally.

This module provides a configured logger with a console handler and an optional
rotating file handler. Logs are human-readable with timestamp, level, module,
and message.

Examples:
    >>> from crawltally.core.logger import get_logger
    >>> logger = get_logger("crawltally", log_level="INFO")
    >>> logger.info("Reading crawl.log")
    2026-01-14 23:45:00,123 | INFO | crawltally | Reading crawl.log
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Human-readable log format with timestamp, level, module name, and message
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Rotating file handler limits (100MB max file size, 5 backup files)
MAX_LOG_SIZE_BYTES = 100 * 1024 * 1024  # 100MB
BACKUP_COUNT = 5


def get_logger(
    name: str,
    log_level: str = "WARNING",
    log_file: Path | None = None,
) -> logging.Logger:
    """Create and configure a logger with console and rotating file handlers.

    The logger includes:
    - Console handler: writes to stderr at the requested level, so report
      output on stdout stays clean
    - Rotating file handler (only when log_file is given): DEBUG level,
      100MB max size, 5 backups
    - Human-readable format: timestamp | level | module | message

    Args:
        name: Logger name (typically "crawltally" or a module name)
        log_level: Logging level as string (DEBUG, INFO, WARNING, ERROR,
            CRITICAL). Defaults to WARNING.
        log_file: Optional path to log file. Parent directories are created
            automatically.

    Returns:
        Configured logging.Logger instance. Calling this function again
        replaces the handlers, so it can be reconfigured.

    Raises:
        ValueError: If log_level is not a valid logging level name.
        OSError: If the log file directory cannot be created.

    Examples:
        >>> logger = get_logger("crawltally.readers", log_level="DEBUG")
        >>> logger.debug("Parsed 10 lines")
        2026-01-14 23:45:01,456 | DEBUG | crawltally.readers | Parsed 10 lines
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(name)
    # Base level must admit DEBUG records when the file handler wants them
    logger.setLevel(logging.DEBUG if log_file is not None else level)

    # Clear existing handlers to allow reconfiguration
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE_BYTES,
            backupCount=BACKUP_COUNT,
        )
        file_handler.setLevel(logging.DEBUG)  # File captures all log levels
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
