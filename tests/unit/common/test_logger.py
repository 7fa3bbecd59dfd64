"""Tests for logging setup."""

import logging

import pytest

from regbridge.common.config import parse_config
from regbridge.common.logger import get_logger, setup_logger, setup_logger_from_config


@pytest.fixture
def clean_logger():
    """Remove handlers added to test loggers."""
    names = []
    yield names
    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


class TestLogger:
    """Tests for logger helpers."""

    def test_get_logger_is_child_of_root(self):
        """Test component loggers live below the regbridge logger."""
        assert get_logger("services").name == "regbridge.services"
        assert get_logger("regbridge").name == "regbridge"
        assert get_logger("regbridge.bridge").name == "regbridge.bridge"

    def test_setup_file_logging(self, tmp_path, clean_logger):
        """Test a rotating log file is created."""
        clean_logger.append("regbridge-test-file")

        logger = setup_logger("regbridge-test-file", log_dir=str(tmp_path), level="debug")

        assert logger.level == logging.DEBUG
        assert (tmp_path / "regbridge-test-file.log").exists()
        assert len(logger.handlers) == 2

    def test_no_duplicate_handlers(self, tmp_path, clean_logger):
        """Test repeated setup does not add handlers."""
        clean_logger.append("regbridge-test-dup")

        setup_logger("regbridge-test-dup", log_dir=str(tmp_path))
        logger = setup_logger("regbridge-test-dup", log_dir=str(tmp_path))

        assert len(logger.handlers) == 2

    def test_invalid_level(self):
        """Test an unknown level is rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logger("regbridge-test-invalid", level="LOUD", file_logging=False)

    def test_setup_from_config(self, tmp_path, clean_logger):
        """Test the root logger is configured from the config file values."""
        clean_logger.append("regbridge")
        config = parse_config(
            {"logging": {"level": "WARNING", "log_dir": str(tmp_path), "console_logging": False}}
        )

        logger = setup_logger_from_config(config)

        assert logger.name == "regbridge"
        assert logger.level == logging.WARNING
        assert (tmp_path / "regbridge.log").exists()
