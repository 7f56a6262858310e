"""Testes do wiring de bootstrap (factory + validação de settings)."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import (
    get_publish_video_use_case,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.twitter_factory import create_publish_video_use_case
from app.observability import correlation_scope
from app.use_cases.twitter import PublishVideoUseCase
from config.logging import CorrelationIdFilter
from config.settings import TwitterSettings, get_base_settings, get_twitter_settings
from tests.fakes.fake_twitter import (
    FakeGateway,
    RecordingSleep,
    finalize_response,
    init_response,
)

SETTINGS = TwitterSettings(
    api_key="consumer-key",
    api_secret="consumer-secret",
    access_token="access-token",
    access_token_secret="access-secret",
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_twitter_settings.cache_clear()
    get_base_settings.cache_clear()
    get_publish_video_use_case.cache_clear()
    yield
    get_twitter_settings.cache_clear()
    get_base_settings.cache_clear()
    get_publish_video_use_case.cache_clear()


class TestCreatePublishVideoUseCase:
    @pytest.mark.asyncio
    async def test_wired_use_case_signs_media_calls_with_oauth1(self) -> None:
        gateway = FakeGateway(
            [
                {"data": {"id": "42"}},
                init_response("m1"),
                {},
                finalize_response("m1"),
                {"data": {"id": "p1"}},
            ]
        )
        use_case = create_publish_video_use_case(SETTINGS, gateway, RecordingSleep())

        result = await use_case.execute(b"abc", "a.mp4", "video/mp4", "bearer")

        assert result.post_id == "p1"
        init, append, finalize = gateway.requests[1:4]
        for request in (init, append, finalize):
            assert request.headers["Authorization"].startswith("OAuth ")
            assert 'oauth_consumer_key="consumer-key"' in request.headers["Authorization"]
            assert 'oauth_token="access-token"' in request.headers["Authorization"]
        assert init.url == SETTINGS.upload_url


class TestValidateRuntimeSettings:
    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("TWITTER_API_KEY", raising=False)
        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("TWITTER_API_KEY", raising=False)
        with pytest.raises(RuntimeError, match="Configuração inválida"):
            validate_runtime_settings()


class TestGetPublishVideoUseCase:
    def test_builds_singleton_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWITTER_API_KEY", "consumer-key")
        monkeypatch.setenv("TWITTER_API_SECRET", "consumer-secret")
        monkeypatch.setenv("TWITTER_ACCESS_TOKEN", "access-token")
        monkeypatch.setenv("TWITTER_ACCESS_TOKEN_SECRET", "access-secret")

        use_case = get_publish_video_use_case()

        assert isinstance(use_case, PublishVideoUseCase)
        assert get_publish_video_use_case() is use_case

    def test_missing_consumer_credentials_raise(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TWITTER_API_KEY", raising=False)
        monkeypatch.delenv("TWITTER_API_SECRET", raising=False)

        with pytest.raises(ValueError):
            get_publish_video_use_case()


class TestInitializeApp:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_configures_json_logging_from_base_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SERVICE_NAME", "svc-teste")

        initialize_app()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        (handler,) = root.handlers
        (correlation_filter,) = handler.filters
        assert isinstance(correlation_filter, CorrelationIdFilter)

        record = logging.LogRecord("t", logging.INFO, "", 0, "msg", (), None)
        with correlation_scope("corr-1"):
            correlation_filter.filter(record)
        assert record.service == "svc-teste"
        assert record.correlation_id == "corr-1"
