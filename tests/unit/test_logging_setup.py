"""Tests for tvdbclient.logging_setup module."""

import logging

import pytest

from tvdbclient.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def _clean_logger():
    """Drop handlers added by each test."""
    logger = logging.getLogger("tvdbclient")
    logger.handlers.clear()
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_logger_with_name(self):
        logger = setup_logging()

        assert logger.name == "tvdbclient"

    def test_sets_log_level_from_string(self):
        logger = setup_logging(level="debug")

        assert logger.level == logging.DEBUG

    def test_defaults_to_info_for_invalid_level(self):
        logger = setup_logging(level="INVALID")

        assert logger.level == logging.INFO

    def test_console_only_without_path(self):
        logger = setup_logging()

        handler_types = [type(h).__name__ for h in logger.handlers]
        assert handler_types == ["StreamHandler"]

    def test_creates_log_directory_and_file(self, tmp_path):
        log_path = tmp_path / "nested" / "logs"

        logger = setup_logging(path=str(log_path))

        assert log_path.exists()
        assert len(list(log_path.glob("tvdbclient*.log"))) == 1
        handler_types = [type(h).__name__ for h in logger.handlers]
        assert "FileHandler" in handler_types
        assert "StreamHandler" in handler_types
