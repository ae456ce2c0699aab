"""Logging utility.

Everything logs under the ``tiny_ceo`` hierarchy. Only the root application
logger owns handlers; module loggers from :func:`get_logger` propagate to it,
so configuring it once in ``main`` covers the analysis, storage and API layers.
"""

import logging
from pathlib import Path
from typing import List, Optional

APP_LOGGER_NAME = "tiny_ceo"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(log_level: str) -> int:
    """Map a level name to its number, INFO for unknown names."""
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        # Parent directory may not exist on a fresh checkout
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure a logger with console and optional file output.

    Handlers are attached only on the first call for a given name; later
    calls just update the level.

    Args:
        name: Logger name
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path, parent directories are created

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    level = _parse_level(log_level)
    logger.setLevel(level)

    if not logger.handlers:
        for handler in _build_handlers(level, log_file):
            logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger below the application logger, e.g. 'tiny_ceo.analysis'."""
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


app_logger: Optional[logging.Logger] = None


def init_app_logger(settings) -> logging.Logger:
    """Configure the application logger from ``settings.log_level`` and ``settings.log_file``."""
    global app_logger
    app_logger = setup_logger(APP_LOGGER_NAME, settings.log_level, settings.log_file)
    return app_logger


def get_app_logger() -> logging.Logger:
    """Return the application logger, with console-only defaults before init."""
    return app_logger if app_logger is not None else setup_logger(APP_LOGGER_NAME)
