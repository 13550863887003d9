"""
Unit tests for the Logger port, the StandardLogger adapter and log level configuration.
"""

import pytest
import logging
from unittest.mock import patch

from skill_metrics.core.ports.logger import Logger
from skill_metrics.core.ports.exceptions import ConfigurationError
from skill_metrics.adapters.logger.standard_logger import StandardLogger, LOG_FORMAT


class TestLoggerPort:
    """Test the Logger interface contract."""

    def test_logger_is_abstract(self):
        """Logger cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Logger()


class TestStandardLogger:
    """Test cases for the StandardLogger adapter."""

    def test_default_name_is_package_logger(self):
        logger = StandardLogger()
        assert isinstance(logger, Logger)
        assert logger.get_logger().name == "skill_metrics"

    @pytest.mark.parametrize("method,target", [
        ("info", "info"),
        ("error", "error"),
        ("warn", "warning"),
        ("debug", "debug"),
    ])
    def test_levels_delegate_to_logging(self, method, target):
        logger = StandardLogger("test.delegate")
        with patch.object(logger.get_logger(), target) as mock_call:
            getattr(logger, method)("Fetching metric")
            mock_call.assert_called_once_with("Fetching metric")

    def test_kwargs_are_appended_as_pairs(self):
        logger = StandardLogger("test.kwargs")
        with patch.object(logger.get_logger(), "info") as mock_info:
            logger.info("Starting metrics report", skill_id="amzn1.ask.skill.x", metrics=9)
            mock_info.assert_called_once_with("Starting metrics report skill_id=amzn1.ask.skill.x metrics=9")

    def test_handler_is_added_once(self):
        first = StandardLogger("test.handlers")
        second = StandardLogger("test.handlers")
        assert first.get_logger() is second.get_logger()
        assert len(second.get_logger().handlers) == 1

    def test_handler_formatter(self):
        logger = StandardLogger("test.format")
        handler = logger.get_logger().handlers[0]
        assert handler.formatter._fmt == LOG_FORMAT

    def test_set_level_applies_to_handlers(self):
        logger = StandardLogger("test.level")
        logger.set_level(logging.DEBUG)

        assert logger.get_logger().level == logging.DEBUG
        for handler in logger.get_logger().handlers:
            assert handler.level == logging.DEBUG

    def test_adapter_loggers_are_children(self):
        """Module loggers under skill_metrics propagate to the package logger."""
        package_logger = StandardLogger().get_logger()
        child = logging.getLogger("skill_metrics.adapters.repositories.smapi_repository")
        assert child.parent is package_logger


class TestConfigureLogging:
    """Test applying LOG_LEVEL names."""

    def test_level_names_are_case_insensitive(self):
        from skill_metrics.core.config.config import configure_logging, logger

        configure_logging("debug")
        assert logger.get_logger().level == logging.DEBUG

        configure_logging("INFO")
        assert logger.get_logger().level == logging.INFO

    def test_unknown_level_raises(self):
        from skill_metrics.core.config.config import configure_logging

        with pytest.raises(ConfigurationError) as exc_info:
            configure_logging("chatty")
        assert exc_info.value.variable == "LOG_LEVEL"
