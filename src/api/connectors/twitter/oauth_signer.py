"""Assinatura OAuth 1.0a (HMAC-SHA1) das requisições de upload de mídia.

A canonicalização da base string (ordenação de parâmetros, percent-encoding,
normalização de URL) é delegada ao oauthlib. Nonce e timestamp vêm de
callables injetáveis para permitir assinaturas determinísticas em testes.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from oauthlib.common import generate_nonce
from oauthlib.oauth1 import SIGNATURE_HMAC_SHA1, Client

from app.protocols.request_signer import SigningError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from app.domain.credentials import TokenPair

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class OAuth1RequestSigner:
    """Gera o header Authorization OAuth 1.0a para cada requisição.

    O par consumer é fixo durante a vida do processo; o par de token
    é informado a cada chamada. Sem efeitos colaterais além de consumir
    nonce_factory/clock.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        nonce_factory: Callable[[], str] = generate_nonce,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not consumer_key or not consumer_secret:
            raise ValueError("consumer_key e consumer_secret são obrigatórios")
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._nonce_factory = nonce_factory
        self._clock = clock

    def sign(
        self,
        url: str,
        http_method: str,
        token_pair: TokenPair,
        body_params: Mapping[str, str] | None = None,
    ) -> str:
        """Retorna o valor completo do header Authorization (`OAuth ...`).

        Args:
            url: URL completa; parâmetros de query entram na base string
            http_method: Método HTTP (GET/POST)
            token_pair: Access token/secret do chamador
            body_params: Campos de corpo url-encoded (entram na base string)

        Raises:
            SigningError: Falha ao gerar nonce/timestamp ou ao assinar.
        """
        try:
            nonce = self._nonce_factory()
            timestamp = str(int(self._clock()))
        except Exception as exc:
            logger.error(
                "oauth_nonce_or_clock_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise SigningError("falha ao gerar nonce/timestamp") from exc

        client = Client(
            self._consumer_key,
            client_secret=self._consumer_secret,
            resource_owner_key=token_pair.key,
            resource_owner_secret=token_pair.secret,
            signature_method=SIGNATURE_HMAC_SHA1,
            nonce=nonce,
            timestamp=timestamp,
        )

        body: str | None = None
        headers: dict[str, str] | None = None
        if body_params:
            body = urlencode(dict(body_params))
            headers = {"Content-Type": FORM_CONTENT_TYPE}

        try:
            _, signed_headers, _ = client.sign(
                url,
                http_method=http_method.upper(),
                body=body,
                headers=headers,
            )
        except ValueError as exc:
            logger.error(
                "oauth_sign_failed",
                extra={"http_method": http_method, "error_type": type(exc).__name__},
            )
            raise SigningError(f"falha ao assinar requisição: {exc}") from exc

        return signed_headers["Authorization"]
