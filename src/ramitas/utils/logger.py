"""Minimal logging utilities for Ramitas.

Provides a simple get_logger function that wraps the standard library logging.
Ramitas never configures handlers; applications decide where records go.

Example:
    >>> from ramitas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering tree")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "ramitas." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'ramitas.mymodule'
    """
    if not (name == "ramitas" or name.startswith("ramitas.")):
        name = f"ramitas.{name}"
    return logging.getLogger(name)
