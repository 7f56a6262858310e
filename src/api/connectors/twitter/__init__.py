"""Conector Twitter/X - adapter de borda para a Twitter API.

Responsabilidades:
- Assinatura OAuth 1.0a (HMAC-SHA1) das chamadas de upload de mídia
- Gateway HTTP (httpx) com taxonomia de erros tipada
- Parsing de erros e logging sem dados sensíveis
"""

from .http_gateway import TwitterHttpGateway, create_twitter_http_gateway
from .oauth_signer import OAuth1RequestSigner
from .twitter_errors import TwitterApiError, parse_twitter_errors

__all__ = [
    "OAuth1RequestSigner",
    "TwitterApiError",
    "TwitterHttpGateway",
    "create_twitter_http_gateway",
    "parse_twitter_errors",
]
