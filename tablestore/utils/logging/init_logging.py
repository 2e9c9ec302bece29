"""Module: init_logging.py

Author: Michael Economou
Date: 2025-05-12

Provides a single entry point to initialize logging for the ``tablestore``
logger hierarchy with app-specific log file names.

The package itself attaches no handlers. A host application calls
init_logging() once to get console output and rotating log files.

Functions:
    init_logging(app_name, log_dir, console): Sets up console and file handlers.
"""

import logging
import os

from tablestore.config import APP_NAME, LOG_LEVEL
from tablestore.utils.logging.logger_factory import get_cached_logger
from tablestore.utils.logging.logger_file_helper import add_file_handler
from tablestore.utils.logging.logger_helper import add_console_handler


def init_logging(
    app_name: str = APP_NAME,
    log_dir: str = "logs",
    *,
    console: bool = True,
) -> logging.Logger:
    """Adds a console handler and rotating file handlers for activity and error logs.

    Handlers are attached to the package root logger, so every module logger
    obtained through get_cached_logger() propagates into them.

    Args:
        app_name (str): The base name for log files (e.g., 'tablestore').
        log_dir (str): Directory that receives the log files.
        console (bool): Whether to also log to stdout.

    Returns:
        logging.Logger: The package root logger.
    """
    logger = get_cached_logger("tablestore")
    logger.setLevel(LOG_LEVEL)

    if console:
        add_console_handler(logger, level=LOG_LEVEL)
    add_file_handler(logger, os.path.join(log_dir, f"{app_name}_activity.log"), level=logging.INFO)
    add_file_handler(logger, os.path.join(log_dir, f"{app_name}_errors.log"), level=logging.ERROR)

    return logger
