"""Minimal logging utilities for Mientras.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from mientras.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering program")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "mientras." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'mientras.mymodule'
    """
    if not (name == "mientras" or name.startswith("mientras.")):
        name = f"mientras.{name}"
    return logging.getLogger(name)
