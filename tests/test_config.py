"""Tests for settings and provider configuration."""

import logging

import pytest

from llm_tool_caller import Provider, get_api_key
from llm_tool_caller.config import Settings


class TestSettings:
    """Settings.from_env parsing."""

    def test_defaults(self):
        """Test settings with an empty environment."""
        settings = Settings.from_env({})
        assert settings.log_level == logging.WARNING
        assert settings.pretty is False

    @pytest.mark.parametrize("raw, level", [("debug", logging.DEBUG), ("INFO", logging.INFO), ("15", 15)])
    def test_log_level(self, raw, level):
        """Test log levels given by name or number."""
        assert Settings.from_env({"LLM_TOOL_CALLER_LOG_LEVEL": raw}).log_level == level

    def test_invalid_log_level(self):
        """Test that an unknown log level is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            Settings.from_env({"LLM_TOOL_CALLER_LOG_LEVEL": "chatty"})

    @pytest.mark.parametrize("raw, expected", [("1", True), ("Yes", True), ("on", True), ("0", False), ("", False)])
    def test_pretty(self, raw, expected):
        """Test truthy and falsy pretty values."""
        assert Settings.from_env({"LLM_TOOL_CALLER_PRETTY": raw}).pretty is expected

    def test_reads_process_environment(self, monkeypatch):
        """Test that the process environment is read by default."""
        monkeypatch.setenv("LLM_TOOL_CALLER_PRETTY", "true")
        assert Settings.from_env().pretty is True


class TestApiKeys:
    """Provider API key lookup."""

    def test_present(self, monkeypatch):
        """Test reading a key from the process environment."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert get_api_key(Provider.OPENAI) == "sk-test"

    def test_missing(self, monkeypatch):
        """Test the error for a missing key."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(RuntimeError, match="ANTHROPIC_API_KEY missing"):
            get_api_key(Provider.ANTHROPIC)

    def test_explicit_environ(self):
        """Test lookup in an explicit environment mapping."""
        assert get_api_key(Provider.GEMINI, {"GEMINI_API_KEY": "g-key"}) == "g-key"
        with pytest.raises(RuntimeError, match="GEMINI_API_KEY missing"):
            get_api_key(Provider.GEMINI, {"GEMINI_API_KEY": ""})

    def test_unknown_provider(self):
        """Test the error for a provider without a key setting."""
        with pytest.raises(RuntimeError, match="No API key setting"):
            get_api_key("mistral", {})
