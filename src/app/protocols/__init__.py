"""Protocolos e contratos do core da aplicação."""

from .http_gateway import (
    ClientError,
    GatewayError,
    GatewayRequest,
    HttpGatewayProtocol,
    MalformedResponseError,
    ServerError,
    TransportError,
)
from .payload_builder import MediaRequestBuilderProtocol
from .request_signer import RequestSignerProtocol, SigningError

__all__ = [
    "ClientError",
    "GatewayError",
    "GatewayRequest",
    "HttpGatewayProtocol",
    "MalformedResponseError",
    "MediaRequestBuilderProtocol",
    "RequestSignerProtocol",
    "ServerError",
    "SigningError",
    "TransportError",
]
