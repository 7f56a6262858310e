"""Protocolo do gateway HTTP e taxonomia de erros de transporte/protocolo.

O app depende apenas deste contrato; a implementação concreta (httpx)
fica em api/connectors/twitter.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Protocol

HttpMethod = Literal["GET", "POST"]

# (nome do arquivo, conteúdo, content-type) conforme multipart do httpx
FilePart = tuple[str, bytes, str]


@dataclass(frozen=True, slots=True)
class GatewayRequest:
    """Requisição HTTP pronta para envio (sem efeitos colaterais).

    Attributes:
        method: GET ou POST
        url: URL completa, incluindo query string quando houver
        headers: Headers adicionais (Authorization entra via with_header)
        data: Campos de formulário (url-encoded, ou multipart quando há files)
        files: Partes binárias do multipart
        json: Corpo JSON
        multipart: Força multipart/form-data mesmo sem partes binárias
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    data: dict[str, str] | None = None
    files: dict[str, FilePart] | None = None
    json: dict[str, Any] | None = None
    multipart: bool = False

    @property
    def is_multipart(self) -> bool:
        return self.multipart or self.files is not None

    @property
    def is_form_urlencoded(self) -> bool:
        """True quando o corpo será enviado como application/x-www-form-urlencoded."""
        return self.data is not None and not self.is_multipart

    @property
    def signable_body_params(self) -> dict[str, str] | None:
        """Parâmetros de corpo que entram na assinatura OAuth 1.0a.

        Apenas corpos url-encoded participam da base string; multipart e JSON não.
        """
        return self.data if self.is_form_urlencoded else None

    def with_header(self, name: str, value: str) -> GatewayRequest:
        """Retorna cópia da requisição com o header adicionado."""
        return replace(self, headers={**self.headers, name: value})


class GatewayError(Exception):
    """Base dos erros do gateway HTTP (sem dados sensíveis)."""

    is_retryable: bool = False

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(GatewayError):
    """Falha de conexão/timeout; retentável pela política do chamador."""

    is_retryable = True


class ClientError(GatewayError):
    """Resposta 4xx; nunca retentável."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body
        self.errors = errors or []


class ServerError(GatewayError):
    """Resposta 5xx; retentável pela política do chamador."""

    is_retryable = True

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


class MalformedResponseError(GatewayError):
    """Corpo da resposta não corresponde ao schema esperado."""


class HttpGatewayProtocol(Protocol):
    """Contrato mínimo do gateway: uma chamada de rede por invocação, sem retry."""

    async def send(self, request: GatewayRequest) -> dict[str, Any]: ...
