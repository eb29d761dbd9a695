"""Centralized logging configuration for folderpick.

Standard output carries the chosen path and the terminal carries the UI, so
log records only ever go to a file. Without one, the package stays silent.
"""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "folderpick"
LOG_FILE_ENV = "FOLDERPICK_LOG"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(log_file: str | None = None, level: int = logging.INFO) -> str | None:
    """Configure the ``folderpick`` logger and return the log file in use.

    ``log_file`` falls back to the ``FOLDERPICK_LOG`` environment variable.
    When neither is set no handler is attached and ``None`` is returned.
    """
    if not log_file:
        log_file = os.environ.get(LOG_FILE_ENV) or None

    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is None:
        return None

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root_logger.addHandler(file_handler)
    return log_file


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``folderpick`` namespace."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


__all__ = ["LOG_FILE_ENV", "PACKAGE_LOGGER", "get_logger", "setup_logging"]
