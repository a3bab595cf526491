"""Defines the :class:`.Logger` class and the package-level logging one-liners."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME = "epochtime"
"""``str``: name of the top-level logger that the one-liner functions write to."""


class Logger:
    """Extended logger wraps the standard Python logging package.

    It also creates a standard file name and log format for any log files that are saved.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``): Name of the the logger instance
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): Path to where the log file will be stored, or ``"stdout"``
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        config = BehavioralConfig.getConfig()
        if level is None:
            level = config.logging.Level
        if not path:
            path = config.logging.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.logging.AllowMultipleHandlers

        self.filename = None
        self.logger = logging.getLogger(name)
        if not self.logger.handlers or allow_multiple_handlers is True:
            if path == "stdout":
                self.filename = "stdout"
                handler = logging.StreamHandler(sys.stdout)

            else:
                if not exists(path):
                    self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                    makedirs(path)

                log_name = f"{name}_{pathSafeTime()}.log"
                self.filename = join(path, log_name)

                handler = RotatingFileHandler(
                    self.filename,
                    maxBytes=config.logging.MaxFileSize,
                    backupCount=config.logging.MaxFileCount,
                )

            formatter = logging.Formatter("%(asctime)s - %(module)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _epochtimeLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.
    The primary use case is for simple functions that need to log messages.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def epochtimeLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _epochtimeLog(message, level=logging.CRITICAL)


def epochtimeLogError(message: str):
    """Log a ERROR message to the top-level log record.

    See Also:
        :func:`._epochtimeLog`
    """
    _epochtimeLog(message, level=logging.ERROR)


def epochtimeLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _epochtimeLog(message, level=logging.WARNING)


def epochtimeLogInfo(message: str):
    """Log a INFO message to the top-level log record."""
    _epochtimeLog(message, level=logging.INFO)


def epochtimeLogDebug(message: str):
    """Log a DEBUG message to the top-level log record."""
    _epochtimeLog(message, level=logging.DEBUG)
