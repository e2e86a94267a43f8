"""Utility modules for argline.

Provides:
- logger: get_logger for logging
"""

from argline.utils.logger import get_logger

__all__ = [
    "get_logger",
]
