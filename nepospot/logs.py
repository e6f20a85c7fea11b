"""Logger setup shared by the service, the CLI and the generator.

Modules log through children of the ``nepospot`` logger (``nepospot.fetcher``,
``nepospot.dataset``, ``nepospot.wikidata``). Those have no handler of their
own, so their records are only written once ``get_logger()`` has run.
"""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

LOGGER_NAME = "nepospot"


def get_logger() -> logging.Logger:
    """Return the ``nepospot`` logger; module loggers are its children."""

    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(LOG_LEVEL)
    logger.propagate = False
    return logger
