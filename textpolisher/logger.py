"""Centralized logging configuration for TextPolisher.

Every module logs through a child of the ``TextPolisher`` logger so that
console and file output can be configured once from the entry point.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler


ROOT_LOGGER_NAME = "TextPolisher"


class PolisherLogger:
    """Centralized logger for TextPolisher."""

    _loggers = {}
    _default_level = logging.INFO
    _log_file = None
    _initialized = False

    @classmethod
    def setup(
        cls,
        level: int = logging.INFO,
        log_file: Optional[Path] = None,
        console: bool = True,
        max_bytes: int = 5 * 1024 * 1024,  # 5MB
        backup_count: int = 3
    ) -> None:
        """Configure global logging settings.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            log_file: Optional path to log file (enables file logging)
            console: Whether to log to stderr (stdout carries corrected text)
            max_bytes: Maximum size of log file before rotation
            backup_count: Number of backup log files to keep
        """
        cls._default_level = level
        cls._log_file = log_file
        cls._initialized = True

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)
        root_logger.handlers.clear()
        root_logger.propagate = False

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        if not root_logger.handlers:
            root_logger.addHandler(logging.NullHandler())

        for logger in cls._loggers.values():
            logger.setLevel(level)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger for a specific module.

        Args:
            name: Logger name (typically __name__ of the module)

        Returns:
            Configured Logger instance
        """
        if not cls._initialized:
            cls.setup()

        if name not in cls._loggers:
            logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
            logger.setLevel(cls._default_level)
            cls._loggers[name] = logger

        return cls._loggers[name]

    @classmethod
    def set_level(cls, level: int) -> None:
        """Change logging level for all loggers."""
        cls._default_level = level
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            handler.setLevel(level)

        for logger in cls._loggers.values():
            logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Usage:
        from textpolisher.logger import get_logger
        logger = get_logger(__name__)
        logger.info("Something happened")
    """
    return PolisherLogger.get_logger(name)
