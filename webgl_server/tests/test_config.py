"""Tests for configuration accessors."""

import pytest
from webgl_server import config


class TestGeminiApiKey:
    def test_returns_key(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "abc123")
        assert config.gemini_api_key() == "abc123"

    def test_read_at_call_time(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "first")
        assert config.gemini_api_key() == "first"
        monkeypatch.setenv("GEMINI_API_KEY", "second")
        assert config.gemini_api_key() == "second"

    def test_missing_raises(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with pytest.raises(config.MissingConfigError, match="GEMINI_API_KEY"):
            config.gemini_api_key()

    def test_has_key_does_not_raise(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        assert config.has_gemini_api_key() is False
        monkeypatch.setenv("GEMINI_API_KEY", "abc123")
        assert config.has_gemini_api_key() is True

    def test_empty_raises(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "")
        with pytest.raises(config.MissingConfigError):
            config.gemini_api_key()


def test_api_url_uses_model():
    assert config.GEMINI_API_URL.endswith(f"/models/{config.GEMINI_MODEL}:generateContent")
