"""Logging configuration.

All modules obtain their logger through :func:`get_logger` so that the
package shares one message format.

Usage::

    from pylandslide.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Rain started at %.1f mm/hr", 50.0)
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a logger configured for the simulator.

    A stdout stream handler is attached the first time a given logger
    is requested; later calls reuse it.

    Args:
        name: Logger name (typically ``__name__``).
        level: Optional logging level.  Left unset, the logger inherits
            the level of its parent.

    Returns:
        Configured :class:`logging.Logger`.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    if level is not None:
        logger.setLevel(level)
    return logger
