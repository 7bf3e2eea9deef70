"""Unit tests for the logging configuration module."""

import importlib
import json
import logging
import sys
from unittest.mock import patch

import pytest

from pinknail.core import logging_config
from pinknail.core.logging_config import (
    DETAILED_FORMAT,
    FORMATS,
    MODULE_LOG_LEVELS,
    JsonFormatter,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put the root logger back the way it was after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _console_handler() -> logging.Handler:
    handlers = [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]
    assert len(handlers) == 1
    return handlers[0]


class TestSetupLoggingLogLevels:
    """Test the console handler level."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_explicit_level(self, level):
        setup_logging(log_level=level, enable_file=False)

        assert _console_handler().level == getattr(logging, level)

    def test_level_is_case_insensitive(self):
        setup_logging(log_level="warning", enable_file=False)

        assert _console_handler().level == logging.WARNING

    def test_default_level_comes_from_module_setting(self):
        with patch.object(logging_config, "LOG_LEVEL", "ERROR"):
            setup_logging(enable_file=False)

        assert _console_handler().level == logging.ERROR

    def test_root_logger_filters_at_handler_level(self):
        setup_logging(log_level="ERROR", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    """Test formatter selection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("simple", SIMPLE_FORMAT), ("detailed", DETAILED_FORMAT)],
    )
    def test_named_formats(self, name, expected):
        setup_logging(log_format=name, enable_file=False)

        assert _console_handler().formatter._fmt == expected

    def test_unknown_format_falls_back_to_detailed(self):
        setup_logging(log_format="fancy", enable_file=False)

        assert _console_handler().formatter._fmt == DETAILED_FORMAT

    def test_formats_mapping(self):
        assert set(FORMATS) == {"simple", "detailed"}

    def test_json_format_uses_json_formatter(self):
        setup_logging(log_format="json", enable_file=False)

        assert isinstance(_console_handler().formatter, JsonFormatter)

    def test_configured_log_format_selects_json(self):
        """Test LOG_FORMAT from settings applies when no override is passed."""
        with patch.object(logging_config, "LOG_FORMAT", "json"):
            setup_logging(enable_file=False)

        assert isinstance(_console_handler().formatter, JsonFormatter)


class TestJsonFormatter:
    """Test the one-object-per-line JSON output."""

    def _record(self, msg, *args, exc_info=None) -> logging.LogRecord:
        return logging.LogRecord(
            "pinknail.test", logging.WARNING, "bookings.py", 42, msg, args, exc_info, func="create"
        )

    def test_quotes_and_newlines_stay_valid_json(self):
        line = JsonFormatter().format(self._record('Rejected "%s"\nretry', "10:00"))

        entry = json.loads(line)
        assert entry["message"] == 'Rejected "10:00"\nretry'
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "pinknail.test"
        assert (entry["module"], entry["function"], entry["line"]) == ("bookings.py", "create", 42)
        assert "\n" not in line

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record("failed", exc_info=sys.exc_info())

        entry = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestSetupLoggingFileHandling:
    """Test the optional file handler."""

    def test_file_handler_added_when_enabled(self, tmp_path):
        with (
            patch.object(logging_config, "ENABLE_FILE_LOGGING", True),
            patch.object(logging_config, "LOG_FILE_DIR", str(tmp_path)),
        ):
            setup_logging(enable_file=True)

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "pinknail.log")
        assert file_handlers[0].level == logging.DEBUG

    def test_file_handler_skipped_when_disabled_by_setting(self, tmp_path):
        with (
            patch.object(logging_config, "ENABLE_FILE_LOGGING", False),
            patch.object(logging_config, "LOG_FILE_DIR", str(tmp_path)),
        ):
            setup_logging(enable_file=True)

        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
        assert not (tmp_path / "pinknail.log").exists()

    def test_file_handler_skipped_when_disabled_by_argument(self, tmp_path):
        with (
            patch.object(logging_config, "ENABLE_FILE_LOGGING", True),
            patch.object(logging_config, "LOG_FILE_DIR", str(tmp_path)),
        ):
            setup_logging(enable_file=False)

        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


class TestSetupLoggingHandlerManagement:
    """Test that repeated setup does not stack handlers."""

    def test_existing_handlers_are_replaced(self):
        logging.getLogger().addHandler(logging.NullHandler())

        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not any(isinstance(h, logging.NullHandler) for h in handlers)


class TestModuleSpecificLevels:
    """Test per-module logger levels."""

    def test_module_levels_applied(self):
        setup_logging(enable_file=False)

        for module_name, level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == getattr(logging, level)

    def test_application_modules_listed(self):
        assert MODULE_LOG_LEVELS["pinknail.server.api"] == "DEBUG"
        assert MODULE_LOG_LEVELS["pinknail.core.database"] == "INFO"

    def test_noisy_libraries_quietened(self):
        assert MODULE_LOG_LEVELS["sqlalchemy.engine"] == "WARNING"
        assert MODULE_LOG_LEVELS["passlib"] == "ERROR"


class TestGetLogger:
    """Test get_logger."""

    def test_returns_named_logger(self):
        logger = get_logger("pinknail.server.services.bookings")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "pinknail.server.services.bookings"

    def test_same_name_same_instance(self):
        assert get_logger("pinknail.test") is get_logger("pinknail.test")

    @pytest.mark.parametrize(
        "module_name",
        [
            "pinknail.core.monitoring",
            "pinknail.server.core.security",
            "pinknail.server.services.analytics",
            "pinknail.server.services.auth",
            "pinknail.server.services.banners",
            "pinknail.server.services.bookings",
            "pinknail.server.services.business_info",
            "pinknail.server.services.contacts",
            "pinknail.server.services.expenses",
            "pinknail.server.services.gallery",
            "pinknail.server.services.gallery_categories",
            "pinknail.server.services.hero_settings",
            "pinknail.server.services.nail_options",
            "pinknail.server.services.service_menu",
        ],
    )
    def test_modules_log_through_get_logger(self, module_name):
        module = importlib.import_module(module_name)

        assert module.get_logger is get_logger
        assert module.logger.name == module_name


class TestLoggingIntegration:
    """Test records flowing through the configured handler."""

    def test_message_respects_console_level(self, capsys):
        setup_logging(log_level="WARNING", log_format="simple", enable_file=False)
        logger = get_logger("pinknail.integration")

        logger.info("quiet message")
        logger.warning("loud message")

        err = capsys.readouterr().err
        assert "quiet message" not in err
        assert "WARNING - pinknail.integration - loud message" in err

    def test_file_receives_debug_records(self, tmp_path):
        with (
            patch.object(logging_config, "ENABLE_FILE_LOGGING", True),
            patch.object(logging_config, "LOG_FILE_DIR", str(tmp_path)),
        ):
            setup_logging(log_level="ERROR", enable_file=True)
        logger = get_logger("pinknail.server.api.file_test")

        logger.debug("debug for the file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "debug for the file" in (tmp_path / "pinknail.log").read_text()
