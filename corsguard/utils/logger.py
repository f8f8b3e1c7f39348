"""Logger setup for corsguard."""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from corsguard.constants import (
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOGGER_NAME,
)


def setup_logger(config_loader, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the CorsLogger shared by the evaluator and the middleware.

    Args:
        config_loader: Configuration loader with get_log_level() method
        log_file: Rotating log file path; console output when None

    Returns:
        Configured Logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config_loader.get_log_level())

    # Reconfiguring replaces the previous handler instead of stacking another
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
