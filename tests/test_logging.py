"""Tests for the package logging setup."""

import logging

from ledger_api.app.core.config import Settings
from ledger_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


def test_configures_package_logger_once(tmp_path):
    log_file = tmp_path / "ledger.log"
    settings = Settings(log_level="debug", log_file=str(log_file))
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers = list(logger.handlers)
    logger.handlers = []
    try:
        first = setup_logging(settings)
        second = setup_logging(settings)
        assert first is second is logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert logger.propagate is False

        logging.getLogger("ledger_api.app.services.user_service").info("stored user")
        for handler in logger.handlers:
            handler.flush()
        assert "stored user" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers = saved_handlers


def test_root_logger_is_left_alone():
    root_handlers = list(logging.getLogger().handlers)
    setup_logging(Settings(log_level="nonsense"))
    assert logging.getLogger().handlers == root_handlers
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
