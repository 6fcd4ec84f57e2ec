"""
Tests for logging configuration.
"""

import pytest
import sys
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tunebox.core import logger as logger_module
from tunebox.core.logger import setup_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the default configuration back after each test."""
    yield
    setup_logging()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self, monkeypatch):
        """Test setup_logging with default parameters."""
        monkeypatch.setitem(logger_module.LOGGING_CONFIG, "LEVEL", "WARNING")
        logger = setup_logging()

        assert logger.name == "tunebox"
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_logging_custom_level(self):
        """Test setup_logging with custom level."""
        logger = setup_logging(level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_setup_logging_lowercase_level(self):
        assert setup_logging(level="info").level == logging.INFO

    def test_setup_logging_disable_console(self):
        """Test setup_logging with console disabled."""
        logger = setup_logging(enable_console=False)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_setup_logging_removes_existing_handlers(self):
        """Test that repeated calls do not stack handlers."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_setup_logging_invalid_level(self):
        """Test that an unknown level falls back to WARNING."""
        logger = setup_logging(level="INVALID_LEVEL")
        assert logger.level == logging.WARNING


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_name(self):
        """Test that module loggers live under the application logger."""
        logger = get_logger("music_library")

        assert logger.name == "tunebox.music_library"
        assert logger.parent is logging.getLogger("tunebox")

    def test_get_logger_configures_when_needed(self):
        """Test that get_logger sets up logging if nothing has yet."""
        logging.getLogger("tunebox").handlers.clear()

        get_logger("cli")

        assert logging.getLogger("tunebox").handlers

    def test_records_reach_application_handler(self, capsys):
        setup_logging(level="INFO")

        get_logger("test").info("hello from test")

        assert "INFO - tunebox.test - hello from test" in capsys.readouterr().out
