"""Tests for CLI logging setup."""

import logging

import pytest

from tinyland_bases.log import PACKAGE_LOGGER, configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestConfigureLogging:
    def test_level_by_name(self, package_logger):
        configure_logging("debug")
        assert package_logger.level == logging.DEBUG

    def test_level_by_number(self, package_logger):
        configure_logging(logging.ERROR)
        assert package_logger.level == logging.ERROR

    def test_single_handler(self, package_logger):
        configure_logging("INFO")
        configure_logging("WARNING")
        assert len(package_logger.handlers) == 1
        assert package_logger.handlers[0].level == logging.WARNING

    def test_unknown_level(self, package_logger):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")
