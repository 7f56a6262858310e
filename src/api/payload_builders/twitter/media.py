"""Builder das requisições do upload chunked e da publicação de posts.

Todos os comandos de mídia usam um único endpoint distinguido pelo campo
`command`: INIT/APPEND em multipart, FINALIZE em form url-encoded e
STATUS em query string. Identidade e post usam Bearer token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from app.protocols.http_gateway import GatewayRequest
from config.settings.twitter import DEFAULT_MEDIA_CATEGORY

if TYPE_CHECKING:
    from app.domain.media_upload import Chunk, MediaUploadSession
    from config.settings.twitter import TwitterSettings


class TwitterRequestBuilder:
    """Monta requisições não assinadas; a assinatura é aplicada pelo chamador."""

    def __init__(
        self,
        upload_url: str,
        users_me_url: str,
        tweets_url: str,
        media_category: str = DEFAULT_MEDIA_CATEGORY,
    ) -> None:
        self._upload_url = upload_url
        self._users_me_url = users_me_url
        self._tweets_url = tweets_url
        self._media_category = media_category

    @classmethod
    def from_settings(cls, settings: TwitterSettings) -> TwitterRequestBuilder:
        return cls(
            upload_url=settings.upload_url,
            users_me_url=settings.users_me_endpoint,
            tweets_url=settings.tweets_endpoint,
            media_category=settings.media_category,
        )

    def build_init(
        self,
        session: MediaUploadSession,
        owner_user_id: str | None,
    ) -> GatewayRequest:
        data = {
            "command": "INIT",
            "total_bytes": str(session.total_bytes),
            "media_type": session.content_type,
            "media_category": self._media_category,
        }
        if owner_user_id:
            data["additional_owners"] = owner_user_id
        return GatewayRequest(
            method="POST",
            url=self._upload_url,
            data=data,
            multipart=True,
        )

    def build_append(self, media_id: str, chunk: Chunk) -> GatewayRequest:
        return GatewayRequest(
            method="POST",
            url=self._upload_url,
            data={
                "command": "APPEND",
                "media_id": media_id,
                "segment_index": str(chunk.index),
                "media_category": self._media_category,
            },
            files={
                "media": (
                    f"chunk_{chunk.index}",
                    bytes(chunk.data),
                    "application/octet-stream",
                ),
            },
        )

    def build_finalize(self, media_id: str) -> GatewayRequest:
        return GatewayRequest(
            method="POST",
            url=self._upload_url,
            data={"command": "FINALIZE", "media_id": media_id},
        )

    def build_status(self, media_id: str) -> GatewayRequest:
        query = urlencode({"command": "STATUS", "media_id": media_id})
        return GatewayRequest(method="GET", url=f"{self._upload_url}?{query}")

    def build_user_me(self, bearer_token: str) -> GatewayRequest:
        return GatewayRequest(
            method="GET",
            url=self._users_me_url,
            headers={"Authorization": f"Bearer {bearer_token}"},
        )

    def build_post(self, media_id: str, text: str, bearer_token: str) -> GatewayRequest:
        return GatewayRequest(
            method="POST",
            url=self._tweets_url,
            headers={
                "Authorization": f"Bearer {bearer_token}",
                "Content-Type": "application/json",
            },
            json={"text": text, "media": {"media_ids": [media_id]}},
        )
