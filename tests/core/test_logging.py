"""
Tests for the logging module.

Tests verify:
- configure_logging renders JSON when asked
- LogContext binds and restores context
- get_logger binds the logger name
"""

import json

import structlog

from railop.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    """Test processor configuration."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_output(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("railop.test").info("event_happened", count=42)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "event_happened"
        assert payload["count"] == 42
        assert payload["level"] == "info"
        assert payload["logger_name"] == "railop.test"

    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("railop.test").debug("hidden")
        assert "hidden" not in capsys.readouterr().out

    def test_defaults_from_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("RAILOP_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("RAILOP_LOG_JSON", "true")
        configure_logging()
        logger = get_logger("railop.test")
        logger.info("quiet")
        logger.warning("loud")

        out = capsys.readouterr().out
        assert "quiet" not in out
        assert json.loads(out.strip().splitlines()[-1])["event"] == "loud"


class TestLogContext:
    """Test scoped context binding."""

    def test_binds_within_scope(self):
        with LogContext(operation="Transfer"):
            assert structlog.contextvars.get_contextvars()["operation"] == "Transfer"
        assert "operation" not in structlog.contextvars.get_contextvars()

    def test_restores_outer_value(self):
        bind_context(operation="Outer")
        with LogContext(operation="Inner"):
            assert structlog.contextvars.get_contextvars()["operation"] == "Inner"
        assert structlog.contextvars.get_contextvars()["operation"] == "Outer"
        clear_context()
