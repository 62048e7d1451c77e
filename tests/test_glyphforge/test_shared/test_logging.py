"""Tests for correlation-aware logging."""

import logging

import pytest

from glyphforge.shared.logging import CorrelationLogger, configure_logging, get_logger


@pytest.fixture
def clean_package_logger():
    package_logger = logging.getLogger("glyphforge")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    package_logger.handlers = handlers
    package_logger.setLevel(level)


class TestCorrelationLogger:
    """Test structured log records."""

    def test_records_carry_component_and_correlation_id(self, caplog):
        logger = get_logger("glyphforge.tests", "req-42", "engine")

        with caplog.at_level(logging.DEBUG, logger="glyphforge.tests"):
            logger.info("Styled text", extra={"style": "bold"})

        record = caplog.records[-1]
        assert record.component == "engine"
        assert record.correlation_id == "req-42"
        assert record.style == "bold"

    def test_component_defaults_to_module_name(self):
        assert CorrelationLogger("glyphforge.api.engine").component == "engine"

    def test_with_correlation_id(self):
        logger = get_logger("glyphforge.tests", None, "engine")
        bound = logger.with_correlation_id("req-7")

        assert bound.correlation_id == "req-7"
        assert bound.component == "engine"
        assert logger.correlation_id is None

    def test_is_enabled_for(self, caplog):
        logger = get_logger("glyphforge.tests")

        with caplog.at_level(logging.ERROR, logger="glyphforge.tests"):
            assert not logger.is_enabled_for(logging.DEBUG)
            assert logger.is_enabled_for(logging.ERROR)


class TestConfigureLogging:
    """Test handler installation."""

    def test_installs_single_handler(self, clean_package_logger):
        configure_logging("INFO")
        configure_logging("DEBUG")

        handlers = [
            handler for handler in clean_package_logger.handlers
            if getattr(handler, "_glyphforge_handler", False)
        ]
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG
        assert clean_package_logger.level == logging.DEBUG
