"""Module implementing the logging utilities."""

import logging
from datetime import datetime
from typing import Any

from keyrank.data.types import FilePath

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def log(info: Any, log_path: FilePath):
    """Logs info to file.

    Args:
        info: The info to log.
        log_path: The file path to log to.
    """
    with open(log_path, 'a') as fp:
        print(datetime.now(), info, file=fp)


def get_logger(name: str = 'keyrank', debug: bool = False) -> logging.Logger:
    """Configures the package logger to write to the standard error.

    Args:
        name: The name of the logger.
        debug: Whether or not to show the debug messages of the ranking engine.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
