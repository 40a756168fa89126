"""Tests for railop.core.settings module."""

import pytest
from pydantic import ValidationError

from railop.core.settings import RailopSettings, get_settings, reset_settings


class TestRailopSettings:
    """Test defaults and environment loading."""

    def test_defaults(self, monkeypatch):
        for key in ("RAILOP_LOG_LEVEL", "RAILOP_LOG_JSON", "RAILOP_TRACE_FRAMES"):
            monkeypatch.delenv(key, raising=False)
        settings = RailopSettings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.trace_frames is False

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("RAILOP_LOG_LEVEL", "debug")
        monkeypatch.setenv("RAILOP_TRACE_FRAMES", "true")
        settings = RailopSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.trace_frames is True

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            RailopSettings(_env_file=None, log_level="LOUD")


class TestGetSettings:
    """Test the cached accessor."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self, monkeypatch):
        monkeypatch.setenv("RAILOP_LOG_JSON", "false")
        assert get_settings().log_json is False
        monkeypatch.setenv("RAILOP_LOG_JSON", "true")
        reset_settings()
        assert get_settings().log_json is True
