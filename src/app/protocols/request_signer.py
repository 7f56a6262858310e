"""Protocolo de assinatura de requisições (OAuth 1.0a HMAC-SHA1)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.credentials import TokenPair


class SigningError(Exception):
    """Falha ao gerar nonce/timestamp ou assinar; fatal e não retentável."""


class RequestSignerProtocol(Protocol):
    """Produz o valor do header Authorization para uma requisição."""

    def sign(
        self,
        url: str,
        http_method: str,
        token_pair: TokenPair,
        body_params: Mapping[str, str] | None = None,
    ) -> str: ...
