"""Logging setup shared by the API and the command-line entrypoints."""

from __future__ import annotations

import logging

LOGGER_NAMESPACE = "webapi_backend"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "webapi-console"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger namespace.

    Calling this more than once only updates the level.
    """

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(handler.get_name() == HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
