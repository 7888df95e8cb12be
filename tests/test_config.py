"""Tests for settings helpers."""
import pytest

from anthropic_docs.config import _int_env, settings


class TestIntEnv:
    """Tests for integer environment variables."""

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("DOCS_TEST_INT", raising=False)
        assert _int_env("DOCS_TEST_INT", 42) == 42

    def test_default_when_empty(self, monkeypatch):
        monkeypatch.setenv("DOCS_TEST_INT", "")
        assert _int_env("DOCS_TEST_INT", 42) == 42

    def test_parses_value(self, monkeypatch):
        monkeypatch.setenv("DOCS_TEST_INT", "8080")
        assert _int_env("DOCS_TEST_INT", 42) == 8080

    def test_invalid_value(self, monkeypatch):
        """Non-integer values raise a readable error."""
        monkeypatch.setenv("DOCS_TEST_INT", "lots")
        with pytest.raises(ValueError) as exc_info:
            _int_env("DOCS_TEST_INT", 42)
        assert "DOCS_TEST_INT" in str(exc_info.value)


class TestSettings:
    def test_defaults(self):
        """Settings carry server identity and response limit."""
        assert settings.SERVER_NAME
        assert settings.CHARACTER_LIMIT > 0
        assert settings.LOG_LEVEL == settings.LOG_LEVEL.upper()
