"""Utility modules for Mientras.

Provides:
- logger: get_logger for logging
"""

from mientras.utils.logger import get_logger

__all__ = [
    "get_logger",
]
