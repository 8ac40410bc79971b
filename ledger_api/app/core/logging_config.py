"""
Logging for the ``ledger_api`` package.

``setup_logging`` attaches handlers to the package logger only, so the
host process (uvicorn, the test runner) keeps control of the root
logger.  Records from ``ledger_api.*`` modules go to the console and,
when ``Settings.log_file`` is set, to that file as well.
"""

import logging
from pathlib import Path

from .config import Settings


PACKAGE_LOGGER = "ledger_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_MARK = "_ledger_api_handler"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure and return the ``ledger_api`` logger.

    The level comes from ``settings.log_level`` (unknown names fall back
    to ``INFO``) and is reapplied on every call.  Handlers are only
    attached once, however often an application is created.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    if any(getattr(handler, _HANDLER_MARK, False) for handler in logger.handlers):
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)

    # Handled here; do not print twice through the root logger.
    logger.propagate = False
    return logger
