"""Tests for logging configuration."""

import json
import logging

from infrastructure.config import ROOT_LOGGER_NAME, get_logger, setup_logger
from infrastructure.config.logger import JSONFormatter, TextFormatter


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tcg_catalog.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Create rejected for series %s",
        args=("SV01",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestGetLogger:
    """Test logger naming."""

    def test_names_are_nested_under_root(self):
        """Test class-named loggers become children of the app logger."""
        assert get_logger("CreateSeriesUseCase").name == f"{ROOT_LOGGER_NAME}.CreateSeriesUseCase"

    def test_root_and_nested_names_kept(self):
        """Test names already in the namespace are untouched."""
        assert get_logger().name == ROOT_LOGGER_NAME
        assert get_logger(f"{ROOT_LOGGER_NAME}.db").name == f"{ROOT_LOGGER_NAME}.db"


class TestFormatters:
    """Test JSON and text formatting."""

    def test_json_formatter_fields(self):
        """Test the structured fields and extra context."""
        payload = json.loads(JSONFormatter().format(make_record(series_id="abc")))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "tcg_catalog.test"
        assert payload["message"] == "Create rejected for series SV01"
        assert payload["series_id"] == "abc"
        assert "exception" not in payload

    def test_text_formatter_contains_message(self):
        """Test the colored text line."""
        line = TextFormatter().format(make_record())
        assert "WARNING" in line
        assert "Create rejected for series SV01" in line


class TestSetupLogger:
    """Test handler installation."""

    def test_setup_installs_single_handler(self):
        """Test repeated setup does not stack handlers."""
        setup_logger(name="tcg_catalog_setup_test", level="DEBUG", log_format="json")
        logger = setup_logger(name="tcg_catalog_setup_test", level="DEBUG", log_format="json")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
