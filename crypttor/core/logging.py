"""Logging utilities for crypttor modules."""

import logging
from enum import Enum
from typing import List, Optional

ROOT_LOGGER_NAME = 'crypttor'

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Handlers attached by configure_logging, removed by reset_logging
_handlers: List[logging.Handler] = []


class LogLevel(Enum):
    """Log levels accepted by configure_logging."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.

    This ensures that loggers work with basicConfig() without needing
    explicit configure_logging() calls. The logger will:
    - Live under the 'crypttor' namespace
    - Propagate to root logger (default behavior)
    - Only set a default level if root logger has no handlers

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    if not name:
        full_name = ROOT_LOGGER_NAME
    elif name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
        full_name = name
    else:
        full_name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(full_name)
    logger.propagate = True

    # Only set default level if root logger has no handlers
    # (i.e., basicConfig hasn't been called yet)
    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    return logger


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    handler: Optional[logging.Handler] = None
) -> logging.Logger:
    """
    Configure the 'crypttor' logger.

    Handlers previously attached by this function are removed first, so it
    can be called repeatedly.

    Args:
        level: Minimum level for the crypttor logger
        log_file: Optional path of a file to append log records to
        enable_console: Attach a stderr stream handler
        handler: Extra handler to attach (e.g. rich's RichHandler)

    Returns:
        The configured 'crypttor' logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    reset_logging()
    logger.setLevel(level.value)

    formatter = logging.Formatter(DEFAULT_FORMAT)
    handlers = []
    if enable_console:
        handlers.append(logging.StreamHandler())
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    for item in handlers:
        item.setFormatter(formatter)
    if handler is not None:
        handlers.append(handler)

    for item in handlers:
        item.setLevel(level.value)
        logger.addHandler(item)
        _handlers.append(item)

    return logger


def reset_logging() -> None:
    """Remove and close the handlers attached by configure_logging."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    while _handlers:
        item = _handlers.pop()
        logger.removeHandler(item)
        item.close()
