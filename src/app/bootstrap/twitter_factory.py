"""Factory de wiring para Twitter/X (bootstrap)."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from api.connectors.twitter import OAuth1RequestSigner, create_twitter_http_gateway
from api.payload_builders.twitter import TwitterRequestBuilder
from app.domain.credentials import TokenPair
from app.services import (
    PostPublisher,
    ProcessingPoller,
    UploadSessionMachine,
    UserIdentityResolver,
)
from app.use_cases.twitter import PublishVideoUseCase
from config.settings.twitter import TwitterSettings, get_twitter_settings

if TYPE_CHECKING:
    from app.protocols.http_gateway import HttpGatewayProtocol


def create_publish_video_use_case(
    settings: TwitterSettings | None = None,
    gateway: HttpGatewayProtocol | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> PublishVideoUseCase:
    """Cria use case de upload + publicação com dependências injetadas.

    Args:
        settings: Settings do canal (default: carregadas do ambiente)
        gateway: Gateway HTTP alternativo (testes)
        sleep: Função de espera do poller (testes)
    """
    settings = settings or get_twitter_settings()
    gateway = gateway or create_twitter_http_gateway(settings)
    signer = OAuth1RequestSigner(settings.api_key, settings.api_secret)
    builder = TwitterRequestBuilder.from_settings(settings)

    default_pair = None
    if settings.access_token and settings.access_token_secret:
        default_pair = TokenPair(settings.access_token, settings.access_token_secret)

    return PublishVideoUseCase(
        identity=UserIdentityResolver(gateway, builder),
        uploader=UploadSessionMachine(
            signer,
            gateway,
            builder,
            chunk_size=settings.chunk_size_bytes,
        ),
        poller=ProcessingPoller(
            signer,
            gateway,
            builder,
            max_attempts=settings.status_max_attempts,
            default_delay_seconds=settings.status_default_delay_seconds,
            sleep=sleep,
        ),
        publisher=PostPublisher(gateway, builder),
        default_token_pair=default_pair,
        default_text=settings.default_post_text,
    )
