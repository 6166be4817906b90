"""Minimal logging utilities for mathspan.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; host applications configure output.

Example:
    >>> from mathspan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning buffer")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "mathspan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("session")
        >>> logger.name
        'mathspan.session'
    """
    if not (name == "mathspan" or name.startswith("mathspan.")):
        name = f"mathspan.{name}"
    return logging.getLogger(name)
