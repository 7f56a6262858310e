"""Protocolo de construção das requisições da Twitter API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.media_upload import Chunk, MediaUploadSession

    from .http_gateway import GatewayRequest


class MediaRequestBuilderProtocol(Protocol):
    """Monta requisições (não assinadas) para cada comando do upload e do post."""

    def build_init(
        self,
        session: MediaUploadSession,
        owner_user_id: str | None,
    ) -> GatewayRequest: ...

    def build_append(self, media_id: str, chunk: Chunk) -> GatewayRequest: ...

    def build_finalize(self, media_id: str) -> GatewayRequest: ...

    def build_status(self, media_id: str) -> GatewayRequest: ...

    def build_user_me(self, bearer_token: str) -> GatewayRequest: ...

    def build_post(self, media_id: str, text: str, bearer_token: str) -> GatewayRequest: ...
