"""Minimal logging utilities for pylox.

Provides a get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from pylox.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, namespaced under "pylox".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'pylox.mymodule'
    """
    if not (name == "pylox" or name.startswith("pylox.")):
        name = f"pylox.{name}"
    return logging.getLogger(name)
