"""Module: logger_helper.py

Author: Michael Economou
Date: 2025-05-12

Provides utility functions for working with loggers in a safe and consistent way.
Includes functions to retrieve or configure named loggers and to safely log
Unicode messages to the console across platforms (Windows, Linux, macOS).

Functions:
    get_logger(name): Returns a logger with UTF-8-safe logging methods.
    add_console_handler(logger): Attaches a UTF-8-safe stdout handler.
    safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
    safe_log(logger_func, message): Logs a message safely, falling back to ASCII if needed.

DevOnlyFilter:
    A logging filter that hides dev-only debug messages from the console,
    while still allowing them to be stored in file logs.
"""

import logging
import re
import sys
from functools import partial

from tablestore.config import LOG_FORMAT, SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text with replacements for problematic characters.
    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message, *args, **kwargs):
    """Logs a message using the given logger function (e.g. logger.info),
    falling back to ASCII-safe output if UnicodeEncodeError occurs.

    Args:
        logger_func (Callable): A logger method like logger.info or logger.error.
        message: The message to log.
    """
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replaces logger's logging methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


class DevOnlyFilter(logging.Filter):
    """Hides records logged with ``extra={"dev_only": True}`` from the console."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)


def add_console_handler(logger: logging.Logger, level: int | str = logging.DEBUG) -> logging.StreamHandler:
    """Attaches a UTF-8-safe stdout handler that hides dev-only records.

    Args:
        logger (logging.Logger): The logger to attach the handler to.
        level (int | str): Logging level for this handler.

    Returns:
        logging.StreamHandler: The attached handler
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(DevOnlyFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    try:
        handler.stream.reconfigure(encoding="utf-8")
    except (AttributeError, OSError, ValueError):
        # Captured streams (pytest, IDE consoles) may not support reconfigure
        pass

    logger.addHandler(handler)
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger with the given name, with its logging methods patched
    to avoid UnicodeEncodeError.

    No handlers are attached here; the host application decides where records
    go (see init_logging()).

    Args:
        name (str): Optional name for the logger (defaults to this module)

    Returns:
        logging.Logger: Patched logger instance
    """
    logger = logging.getLogger(name or __name__)

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger
