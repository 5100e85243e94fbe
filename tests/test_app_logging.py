"""Tests for logging configuration."""

import logging

from fitness_tracker.app_logging import LOGGER_NAME, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("debug")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_module_loggers_inherit_package_level() -> None:
    configure_logging("WARNING")

    child = logging.getLogger(f"{LOGGER_NAME}.services.nutrition_logs")

    assert child.getEffectiveLevel() == logging.WARNING
    assert not child.isEnabledFor(logging.INFO)
