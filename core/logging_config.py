"""
Logging Configuration
Sets up the library loggers for console (and optionally file) output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# top-level packages that make up the library
LOGGER_NAMESPACES = ("core", "distributions", "geometry", "app")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the loggers of every library package.

    Parameters
    ----------
    level : int
        Logging level (e.g. logging.DEBUG, logging.INFO)
    log_file : str, optional
        Path to also write logs to.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    handlers = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for namespace in LOGGER_NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)
        # avoid duplicate output when called twice (e.g. streamlit reruns)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("core").info("Logging initialized.")
