"""Publicação do post referenciando a mídia concluída (Bearer token)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.errors import PublishError, UsageError
from app.domain.media_responses import TweetCreateResponse, parse_response
from app.protocols.http_gateway import GatewayError

if TYPE_CHECKING:
    from app.protocols.http_gateway import HttpGatewayProtocol
    from app.protocols.payload_builder import MediaRequestBuilderProtocol

logger = logging.getLogger(__name__)


class PostPublisher:
    """Publica um post com a mídia anexada; uma única chamada, sem retry."""

    def __init__(
        self,
        gateway: HttpGatewayProtocol,
        builder: MediaRequestBuilderProtocol,
    ) -> None:
        self._gateway = gateway
        self._builder = builder

    async def publish(self, media_id: str, text: str, bearer_token: str) -> str:
        """Publica e retorna o id do post.

        Raises:
            UsageError: media_id ou bearer_token vazios
            PublishError: Falha do gateway ou resposta fora do schema
        """
        if not media_id:
            raise UsageError("media_id é obrigatório para publicar")
        if not bearer_token or not bearer_token.strip():
            raise UsageError("bearer_token é obrigatório para publicar")

        request = self._builder.build_post(media_id, text, bearer_token)
        try:
            payload = await self._gateway.send(request)
            post = parse_response(TweetCreateResponse, payload)
        except GatewayError as exc:
            logger.warning(
                "post_publish_failed",
                extra={
                    "media_id": media_id,
                    "error_type": type(exc).__name__,
                    "status_code": exc.status_code,
                },
            )
            raise PublishError("publicação do post falhou", exc) from exc

        logger.info("post_published", extra={"media_id": media_id, "post_id": post.data.id})
        return post.data.id
