"""Testes para TwitterSettings e BaseSettings."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    TwitterSettings,
    get_base_settings,
    get_twitter_settings,
)
from config.settings.twitter import DEFAULT_CHUNK_SIZE_BYTES, DEFAULT_POST_TEXT


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_twitter_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_twitter_settings.cache_clear()
    get_base_settings.cache_clear()


class TestTwitterSettings:
    """Defaults, endpoints e validação."""

    def test_defaults(self) -> None:
        settings = TwitterSettings()
        assert settings.chunk_size_bytes == DEFAULT_CHUNK_SIZE_BYTES == 5 * 1024 * 1024
        assert settings.status_max_attempts == 30
        assert settings.status_default_delay_seconds == 5.0
        assert settings.media_category == "amplify_video"
        assert settings.default_post_text == DEFAULT_POST_TEXT
        assert settings.tweets_endpoint == "https://api.x.com/2/tweets"
        assert settings.users_me_endpoint == "https://api.x.com/2/users/me"

    def test_validate_reports_missing_credentials(self) -> None:
        errors = TwitterSettings().validate()
        assert any("TWITTER_API_KEY" in e for e in errors)
        assert any("TWITTER_ACCESS_TOKEN" in e for e in errors)

    def test_validate_reports_invalid_numbers(self) -> None:
        settings = TwitterSettings(
            api_key="k",
            api_secret="s",
            access_token="t",
            access_token_secret="ts",
            chunk_size_bytes=0,
            status_max_attempts=0,
        )
        errors = settings.validate()
        assert len(errors) == 2

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWITTER_API_KEY", "key")
        monkeypatch.setenv("TWITTER_API_SECRET", "secret")
        monkeypatch.setenv("TWITTER_CHUNK_SIZE_BYTES", "1024")
        monkeypatch.setenv("TWITTER_STATUS_MAX_ATTEMPTS", "3")
        monkeypatch.setenv("TWITTER_API_BASE_URL", "https://api.test")

        settings = get_twitter_settings()

        assert settings.api_key == "key"
        assert settings.chunk_size_bytes == 1024
        assert settings.status_max_attempts == 3
        assert settings.tweets_endpoint == "https://api.test/2/tweets"
        assert get_twitter_settings() is settings


class TestBaseSettings:
    """Ambiente e nível de log."""

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        settings = get_base_settings()
        assert settings.is_production is True
        assert settings.is_strict is True

    def test_invalid_log_level(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()
        assert errors == ["LOG_LEVEL inválido: LOUD"]
