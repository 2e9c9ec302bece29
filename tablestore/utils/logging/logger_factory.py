"""Module: logger_factory.py

Author: Michael Economou
Date: 2025-05-31

Optimized logger factory with caching for improved performance.
Provides centralized logger management with thread-safe operations.
"""

import logging
import threading

from tablestore.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name, reducing memory usage
    compared to creating new loggers repeatedly.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance
        """
        name = name or "tablestore"

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)

                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)

                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int | None) -> None:
        """Set logging level for all cached loggers.

        Args:
            level (int): Logging level (e.g., logging.DEBUG), or None to let
                every logger inherit from its parent again
        """
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(logging.NOTSET if level is None else level)


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting cached logger.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Cached logger instance
    """
    return LoggerFactory.get_logger(name)
