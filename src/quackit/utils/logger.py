"""Logger namespace for Quackit.

Every module logs under the ``quackit`` logger so applications can turn
scanner and dispatch tracing on with one call:

    >>> import logging
    >>> logging.getLogger("quackit").setLevel(logging.DEBUG)

The library only ever attaches a NullHandler to the ``quackit`` logger.
Output goes wherever the application's logging config sends it (the CLI
uses ``logging.basicConfig`` when ``--verbose`` is given).

Example:
    >>> from quackit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Queued %d characters at depth %d", 12, 1)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "quackit"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``quackit`` namespace.

    Args:
        name: Module name (typically __name__) or a bare suffix

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("quackit.engine").name
        'quackit.engine'
        >>> get_logger("exec").name
        'quackit.exec'
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
