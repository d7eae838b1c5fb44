"""Tests for logging configuration and redaction."""

import logging

from lirix.logging_config import get_logger, log_with_context, setup_logging
from lirix.middleware.logging_middleware import redact_sensitive_data


def test_redacts_api_key():
    """Test the OpenWeatherMap appid is redacted."""
    url = "https://api.openweathermap.org/data/2.5/weather?id=2643743&appid=secret123"

    redacted = redact_sensitive_data(url)

    assert "secret123" not in redacted
    assert "appid=***REDACTED***" in redacted
    assert "id=2643743" in redacted


def test_leaves_clean_urls_untouched():
    """Test URLs without secrets are unchanged."""
    url = "https://api.openweathermap.org/data/2.5/forecast?id=524901"

    assert redact_sensitive_data(url) == url


def test_setup_logging_writes_json_file(tmp_path):
    """Test setup installs a file and a console handler."""
    root = setup_logging("DEBUG", log_dir=tmp_path)
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        log_with_context(get_logger("lirix.test"), "info", "hello", location_id="42")
        for handler in root.handlers:
            handler.flush()

        content = (tmp_path / "lirix.log").read_text(encoding="utf-8")
        assert '"message": "hello"' in content
        assert '"location_id": "42"' in content
    finally:
        for handler in list(root.handlers):
            handler.close()
        root.handlers.clear()
