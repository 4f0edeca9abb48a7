"""
Logging configuration for the Zen Class reporting API.
Centralizes all logging setup so every module only calls logging.getLogger(__name__).
"""
import os
import logging
from logging.handlers import RotatingFileHandler

from zenclass.config.settings import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_FILE_NAME,
    LOG_LEVEL,
    MAX_LOG_SIZE,
)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=None, log_dir=None):
    """
    Set up logging for the zenclass package.

    Args:
        level: Optional level name overriding LOG_LEVEL
        log_dir: Optional directory overriding LOG_DIR; pass "" to skip the file handler

    Returns:
        The configured "zenclass" logger
    """
    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger("zenclass")
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))

    # Only configure if handlers haven't been added yet
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_dir = LOG_DIR if log_dir is None else log_dir
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            # delay=True avoids opening the file until the first record
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, LOG_FILE_NAME),
                maxBytes=MAX_LOG_SIZE,
                backupCount=LOG_BACKUP_COUNT,
                delay=True
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    return logger
