"""Logging utilities."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from ndcore.utils.config import Config


logging.getLogger("ndcore").addHandler(logging.NullHandler())


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = Config.get("logging.level", "WARNING")
    if isinstance(level, str):
        return logging.getLevelName(level.upper())
    return level


def setup_logger(
    name: str = "ndcore",
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Setup logger with stdout output and optional file output.

    Parameters
    ----------
    name : str
        Logger name
    level : int or str, optional
        Logging level; defaults to ``Config "logging.level"``
    log_file : Path, optional
        Additional file to log to

    Returns
    -------
    logging.Logger
        Configured logger
    """
    level = _resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(Config.get("logging.format"))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger in the ``ndcore`` namespace.

    No handlers are attached; records propagate to whatever the application
    configured, or are dropped by the package ``NullHandler``. Call
    ``setup_logger`` to send them to stdout or a file.
    """
    return logging.getLogger(f"ndcore.{name}" if name else "ndcore")
