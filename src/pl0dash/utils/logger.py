"""Minimal logging utilities for pl0dash.

Library modules only create loggers; handlers and levels are configured by
the command line driver.

Example:
    >>> from pl0dash.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("parsing %s", "gcd.pl0")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "pl0dash." prefix.

    Example:
        >>> get_logger("mymodule").name
        'pl0dash.mymodule'
    """
    if not (name == "pl0dash" or name.startswith("pl0dash.")):
        name = f"pl0dash.{name}"
    return logging.getLogger(name)
