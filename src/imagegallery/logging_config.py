"""
Logging Configuration
Sets up the 'imagegallery' logger. Level and an optional log file come from
the environment so a running gallery can be traced without code changes:

    IMAGEGALLERY_LOG_LEVEL=DEBUG IMAGEGALLERY_LOG_FILE=gallery.log python run.py
"""
import logging
import os
import sys
from typing import Optional

from imagegallery.config import LOG_FILE_ENV, LOG_LEVEL_ENV

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Map 'debug', 'WARNING', ... to a logging level; unknown names give `default`."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'imagegallery' namespace.

    Scheduling and guard paths (ignored clicks, page boundaries) log at DEBUG;
    catalog loading and gallery statistics at INFO.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the log to.
    """
    logger = logging.getLogger("imagegallery")
    logger.setLevel(level)

    # The window can be rebuilt in one process (tests); never stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}"
                + (f", writing to {log_file}." if log_file else "."))
    return logger


def setup_logging_from_env() -> logging.Logger:
    return setup_logging(
        level=level_from_name(os.environ.get(LOG_LEVEL_ENV)),
        log_file=os.environ.get(LOG_FILE_ENV) or None,
    )
