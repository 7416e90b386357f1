# -*- coding: utf-8 -*-
"""
Tests for the logging setup.
"""

import logging

import pytest

from app.config import Config
from utils.logger import get_logger, resolve_level, setup_logger


@pytest.fixture
def log_file(tmp_path):
    """Point the survey logger at a temporary file, then restore the default setup."""
    path = tmp_path / "logs" / "survey.log"
    yield path
    setup_logger(console=False)


class TestResolveLevel:
    """Test level names from configuration."""

    @pytest.mark.parametrize("name, expected", [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        (logging.ERROR, logging.ERROR),
    ])
    def test_known_levels(self, name, expected):
        """Test names are case and whitespace insensitive."""
        assert resolve_level(name) == expected

    def test_unknown_level(self):
        """Test a misspelt level is rejected."""
        with pytest.raises(ValueError):
            resolve_level("LOUD")


class TestSetupLogger:
    """Test file logging for survey modules."""

    def test_module_logger_writes_to_file(self, log_file):
        """Test child loggers write Arabic text to the configured file."""
        setup_logger(log_path=log_file, console=False)
        logger = get_logger("services.wizard")

        logger.info("تم حفظ المسودة")

        assert logger.name == f"{Config.LOGGER_NAME}.services.wizard"
        content = log_file.read_text(encoding="utf-8")
        assert "INFO" in content
        assert "تم حفظ المسودة" in content

    def test_level_filters_file_output(self, log_file):
        """Test records below the configured level are dropped."""
        setup_logger(log_path=log_file, level="WARNING", console=False)
        logger = get_logger("repositories")

        logger.info("hidden")
        logger.warning("shown")

        content = log_file.read_text(encoding="utf-8")
        assert "hidden" not in content
        assert "shown" in content

    def test_setup_replaces_handlers(self, log_file):
        """Test repeated setup does not stack handlers."""
        setup_logger(log_path=log_file, console=False)
        logger = setup_logger(log_path=log_file, console=True)

        assert len(logger.handlers) == 2
        assert logger.propagate is False
