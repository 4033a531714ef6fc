"""Minimal logging utilities for Tinta.

Every module logs under the "tinta." namespace. The scanner stays silent
on the happy path; the records it does emit are:

- tinta.scanner.decode, DEBUG: a span that is not valid text was dropped
  (not emitted in strict mode, which raises DecodeError instead)
- tinta.loader, ERROR: a document could not be read and an empty one was
  scanned in its place

Tinta never installs handlers; configure "tinta" to see these records.

Example:
    >>> from tinta.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tinta." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tinta.mymodule'
    """
    if not (name == "tinta" or name.startswith("tinta.")):
        name = f"tinta.{name}"
    return logging.getLogger(name)
