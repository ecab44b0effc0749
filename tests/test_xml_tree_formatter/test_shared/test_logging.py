"""Tests for correlation-aware logging."""

import logging

import pytest

from xml_tree_formatter.shared.logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)


class TestCorrelationLogger:
    """Test structured extras on log records."""

    def test_component_defaults_to_module_name(self) -> None:
        """Test the component derived from the logger name."""
        logger = get_logger("xml_tree_formatter.tree.builder")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "builder"
        assert logger.correlation_id is None

    def test_records_carry_extras(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that component, correlation id and extras reach the record."""
        logger = get_logger("xml_tree_formatter.test", "corr-7", "unit")

        with caplog.at_level(logging.DEBUG, logger="xml_tree_formatter"):
            logger.debug("hello", extra={"size": 3})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.component == "unit"
        assert record.correlation_id == "corr-7"
        assert record.size == 3

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test exception logging."""
        logger = get_logger("xml_tree_formatter.test")

        with caplog.at_level(logging.ERROR, logger="xml_tree_formatter"):
            try:
                raise ValueError("broken")
            except ValueError:
                logger.exception("failed")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None


class TestConfigureLogging:
    """Test package logger configuration."""

    def test_handler_added_once(self) -> None:
        """Test repeated configuration does not stack handlers."""
        package_logger = logging.getLogger("xml_tree_formatter")
        original_handlers = list(package_logger.handlers)
        original_level = package_logger.level

        try:
            package_logger.handlers = []
            configure_logging("DEBUG")
            configure_logging("ERROR")

            assert len(package_logger.handlers) == 1
            assert package_logger.level == logging.ERROR
        finally:
            package_logger.handlers = original_handlers
            package_logger.setLevel(original_level)
