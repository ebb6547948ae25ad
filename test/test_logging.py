"""
Tests for structured logging
"""

import json
import logging

from localization.context import set_active_locale
from localization.logging_config import LocaleFilter, StructuredFormatter, setup_structured_logging


def _record(message="hello", **extra):
    record = logging.LogRecord("localization.test", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLocaleFilter:
    def test_stamps_active_locale(self):
        set_active_locale("es")
        record = _record()
        assert LocaleFilter().filter(record) is True
        assert record.locale == "es"

    def test_empty_outside_request(self):
        record = _record()
        LocaleFilter().filter(record)
        assert record.locale == ""


class TestStructuredFormatter:
    def test_json_output(self):
        record = _record("Redirecting", locale="ar", host="example.com", status_code=301)
        data = json.loads(StructuredFormatter().format(record))
        assert data["message"] == "Redirecting"
        assert data["level"] == "INFO"
        assert data["logger"] == "localization.test"
        assert data["locale"] == "ar"
        assert data["host"] == "example.com"
        assert data["status_code"] == 301
        assert "timestamp" in data

    def test_unicode_kept(self):
        data = StructuredFormatter().format(_record("Español", locale="es"))
        assert "Español" in data


class TestSetupStructuredLogging:
    def test_installs_single_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            handler = setup_structured_logging("DEBUG", json_format=True)
            assert root.handlers == [handler]
            assert isinstance(handler.formatter, StructuredFormatter)
            assert any(isinstance(f, LocaleFilter) for f in handler.filters)
            assert logging.getLogger("localization").level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_plain_format(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            handler = setup_structured_logging("INFO", json_format=False)
            assert not isinstance(handler.formatter, StructuredFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
