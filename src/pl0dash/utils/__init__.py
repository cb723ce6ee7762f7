"""Utility modules for pl0dash.

Provides:
- logger: get_logger for logging
"""

from pl0dash.utils.logger import get_logger

__all__ = [
    "get_logger",
]
