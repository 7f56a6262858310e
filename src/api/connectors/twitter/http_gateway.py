"""Gateway HTTP assíncrono para a Twitter API.

Executa exatamente uma chamada de rede por invocação e traduz falhas de
transporte/protocolo na taxonomia GatewayError. Não faz retry: a política
de nova tentativa pertence aos chamadores (ex: ProcessingPoller).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.twitter.twitter_errors import parse_twitter_errors
from api.connectors.twitter.twitter_logging import log_gateway_error, log_success
from app.protocols.http_gateway import (
    ClientError,
    GatewayError,
    MalformedResponseError,
    ServerError,
    TransportError,
)

if TYPE_CHECKING:
    from app.protocols.http_gateway import GatewayRequest
    from config.settings import TwitterSettings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
# Limite de corpo guardado em ClientError/ServerError para diagnóstico
_MAX_ERROR_BODY_CHARS = 2000


class TwitterHttpGateway:
    """Gateway HTTP com timeout limitado por chamada.

    Args:
        timeout_seconds: Timeout de transporte por requisição
        transport: Transporte httpx alternativo (ex: httpx.MockTransport em testes)
        client: AsyncClient compartilhado; se None, um cliente é aberto por chamada
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout_seconds
        self._transport = transport
        self._client = client

    async def send(self, request: GatewayRequest) -> dict[str, Any]:
        """Envia a requisição e retorna o corpo JSON (ou {} se vazio).

        Raises:
            TransportError: Falha de conexão/timeout
            ClientError: Resposta 4xx
            ServerError: Resposta 5xx
            MalformedResponseError: Corpo 2xx que não é um objeto JSON,
                corpo não decodificável ou status 1xx/3xx
            GatewayError: Requisição não concluída (ex: URL inválida)
        """
        try:
            if self._client is not None:
                response = await self._client.request(**self._request_kwargs(request))
            else:
                async with httpx.AsyncClient(transport=self._transport) as client:
                    response = await client.request(**self._request_kwargs(request))
        except httpx.DecodingError as exc:
            log_gateway_error(request.method, request.url, "malformed")
            raise MalformedResponseError(
                f"corpo da resposta não decodificável: {type(exc).__name__}"
            ) from exc
        except httpx.TransportError as exc:
            log_gateway_error(request.method, request.url, "transport")
            raise TransportError(f"falha de transporte: {type(exc).__name__}") from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            # Ex: TooManyRedirects, InvalidURL; não retentável
            log_gateway_error(request.method, request.url, "request")
            raise GatewayError(f"requisição não concluída: {type(exc).__name__}") from exc

        return self._process_response(request, response)

    def _request_kwargs(self, request: GatewayRequest) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "method": request.method,
            "url": request.url,
            "headers": request.headers,
            "timeout": self._timeout,
        }
        if request.json is not None:
            kwargs["json"] = request.json
        elif request.is_multipart:
            fields = request.data or {}
            if request.files:
                kwargs["data"] = fields
                kwargs["files"] = request.files
            else:
                # Sem partes binárias o httpx enviaria url-encoded
                kwargs["files"] = {name: (None, value) for name, value in fields.items()}
        elif request.data is not None:
            kwargs["data"] = request.data
        return kwargs

    def _process_response(
        self,
        request: GatewayRequest,
        response: httpx.Response,
    ) -> dict[str, Any]:
        status_code = response.status_code

        if status_code >= 500:
            log_gateway_error(request.method, request.url, "server", status_code)
            raise ServerError(
                f"erro do servidor: HTTP {status_code}",
                status_code=status_code,
                body=response.text[:_MAX_ERROR_BODY_CHARS],
            )

        if status_code < 400 and not response.is_success:
            # 1xx/3xx: redirects não são seguidos; não é 4xx nem resposta válida
            log_gateway_error(request.method, request.url, "unexpected_status", status_code)
            raise MalformedResponseError(
                f"status inesperado: HTTP {status_code}",
                status_code=status_code,
            )

        if not response.is_success:
            errors = parse_twitter_errors(_json_or_none(response))
            log_gateway_error(
                request.method,
                request.url,
                "client",
                status_code,
                [e.code for e in errors if e.code is not None],
            )
            raise ClientError(
                f"requisição rejeitada: HTTP {status_code}",
                status_code=status_code,
                body=response.text[:_MAX_ERROR_BODY_CHARS],
                errors=[
                    {"code": e.code, "message": e.message, "title": e.title}
                    for e in errors
                ],
            )

        if not response.content.strip():
            log_success(request.method, request.url, status_code)
            return {}

        data = _json_or_none(response)
        if not isinstance(data, dict):
            log_gateway_error(request.method, request.url, "malformed", status_code)
            raise MalformedResponseError(
                "corpo da resposta não é um objeto JSON",
                status_code=status_code,
            )

        log_success(request.method, request.url, status_code)
        return data


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def create_twitter_http_gateway(
    settings: TwitterSettings | None = None,
) -> TwitterHttpGateway:
    """Factory para criar o gateway com timeout configurado.

    Args:
        settings: TwitterSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_twitter_settings

    twitter = settings or get_twitter_settings()
    return TwitterHttpGateway(timeout_seconds=twitter.request_timeout_seconds)
