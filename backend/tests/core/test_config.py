"""Tests for application configuration."""
import logging

import pytest
from pydantic import ValidationError

from core.config import Settings
from core.logging import configure_logging


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_parse_single_origin_string(self) -> None:
        """Single origin string is parsed correctly."""
        settings = Settings(_env_file=None, CORS_ORIGINS="http://localhost:5173")
        assert settings.cors_origins == ["http://localhost:5173"]

    def test_parse_origins_with_whitespace(self) -> None:
        """Whitespace around origins is stripped and empties dropped."""
        settings = Settings(
            _env_file=None,
            CORS_ORIGINS="  http://localhost:5173 , https://example.com ,",
        )
        assert settings.cors_origins == [
            "http://localhost:5173",
            "https://example.com",
        ]

    def test_parse_empty_string(self) -> None:
        """Empty string results in empty list."""
        settings = Settings(_env_file=None, CORS_ORIGINS="")
        assert settings.cors_origins == []


class TestLLMProviderSetting:
    """Tests for language-model provider selection."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Gemini is the default provider with the original models."""
        monkeypatch.delenv("LLM_PROVIDER", raising=False)
        monkeypatch.delenv("OPENAI_MODEL", raising=False)
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.llm_provider == "gemini"
        assert settings.openai_model == "gpt-4o"
        assert settings.gemini_model == "gemini-pro"

    def test_provider_name_is_normalized(self) -> None:
        """Provider names are case-insensitive."""
        settings = Settings(_env_file=None, LLM_PROVIDER=" OpenAI ")
        assert settings.llm_provider == "openai"

    def test_unknown_provider_rejected(self) -> None:
        """Unknown providers fail validation."""
        with pytest.raises(ValidationError, match="Unknown LLM_PROVIDER"):
            Settings(_env_file=None, LLM_PROVIDER="llama")

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values come from environment variables."""
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("SEED_DATA", "false")
        settings = Settings(_env_file=None)
        assert settings.llm_provider == "openai"
        assert settings.openai_api_key == "sk-test"
        assert settings.seed_data is False


def test__configure_logging__sets_root_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    root.handlers = []
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
