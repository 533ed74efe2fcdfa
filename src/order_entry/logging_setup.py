"""Logging configuration for the ``order_entry`` logger tree.

Modules log through ``logging.getLogger(__name__)``; this installs a single
stream handler on the package logger so library users who configure
logging themselves are left alone unless they call it.
"""

from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "order_entry"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO", json: bool = False) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler()
    if json:
        handler.setFormatter(jsonlogger.JsonFormatter(_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
