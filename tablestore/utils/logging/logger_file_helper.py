"""Module: logger_file_helper.py

Author: Michael Economou
Date: 2025-05-31

Provides utility functions to attach file handlers to a logger.

Functions:
    add_file_handler: Attaches a rotating file handler with a custom level.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from tablestore.config import (
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_FILE_MAX_BYTES,
)


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = LOG_FILE_MAX_BYTES,
    backup_count: int = LOG_FILE_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Attaches a rotating file handler to a logger.

    Args:
        logger (logging.Logger): The logger to attach the handler to.
        log_path (str): Path to the log file.
        level (int): Logging level for this file handler (e.g., logging.ERROR).
        max_bytes (int): Maximum file size before rotating.
        backup_count (int): Number of backup files to keep.

    Returns:
        RotatingFileHandler: The attached handler
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT))

    logger.addHandler(file_handler)
    return file_handler
