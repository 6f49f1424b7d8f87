"""Unit tests for application settings."""

import logging

import pytest

from request_outcome.settings import AppSettings, get_settings


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults apply when no environment is set."""
        for name in ("API_BASE_URL", "REQUEST_TIMEOUT_SECONDS", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(name, raising=False)

        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]

        assert settings.api_base_url == "http://127.0.0.1:8080"
        assert settings.request_timeout_seconds == 30.0
        assert settings.log_json is True
        assert settings.log_level_number == logging.INFO

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values are read from environment variables."""
        monkeypatch.setenv("API_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_JSON", "false")

        settings = get_settings()

        assert settings.api_base_url == "https://api.example.com"
        assert settings.request_timeout_seconds == 5.0
        assert settings.log_level_number == logging.DEBUG
        assert settings.log_json is False

    def test_unknown_log_level_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unrecognised level names map to INFO."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert get_settings().log_level_number == logging.INFO

    def test_to_client_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings produce a matching client configuration."""
        monkeypatch.setenv("API_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "7.5")

        config = get_settings().to_client_config()

        assert config.base_url == "https://api.example.com"
        assert config.timeout_seconds == 7.5
