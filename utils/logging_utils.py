# utils/logging_utils.py

"""
Logging helpers for the golf-wind project.

Library modules only ever call:

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.debug("donated hole %d", hole)

and leave handler setup to the entry point, which calls
`configure_root_logger` once.
"""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional

from config import LOGS_DIR


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Repeated calls with the same name return the same logger.
_LOGGER_CACHE: dict[str, Logger] = {}


def _ensure_log_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def configure_root_logger(
    level: int = logging.INFO,
    log_to_file: bool = False,
    log_to_stdout: bool = True,
    filename: str = "golf_wind.log",
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure the root logger for the whole project.

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, write logs to `log_dir / filename`.
        log_to_stdout:
            If True, also log to the console.
        filename:
            Name of the log file.
        log_dir:
            Directory for the log file; defaults to config.LOGS_DIR.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by pytest); only adjust the level.
        root.setLevel(level)
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = []

    if log_to_file:
        directory = log_dir or LOGS_DIR
        _ensure_log_dir(directory)
        fh = logging.FileHandler(directory / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_stdout:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Get a (cached) logger by name.

    Unlike configure_root_logger this never installs handlers, so importing
    a library module has no side effects on logging output.
    """
    if name is None:
        name = "__main__"

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]
