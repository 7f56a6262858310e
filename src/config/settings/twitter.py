"""Settings específicas de Twitter/X.

Configurações do canal Twitter: upload chunked de mídia (API v1.1, assinada
com OAuth 1.0a) e publicação de posts (API v2, Bearer token).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Twitter API
TWITTER_UPLOAD_URL: str = "https://upload.twitter.com/1.1/media/upload.json"
TWITTER_API_BASE_URL: str = "https://api.x.com"
TWITTER_API_VERSION: str = "2"

DEFAULT_CHUNK_SIZE_BYTES: int = 5 * 1024 * 1024  # 5 MiB
DEFAULT_MEDIA_CATEGORY: str = "amplify_video"
DEFAULT_POST_TEXT: str = "Check out this cool content!"


@dataclass(frozen=True)
class TwitterSettings:
    """Configurações do canal Twitter/X.

    Attributes:
        api_key: API Key (Consumer Key), fixa durante a vida do processo
        api_secret: API Secret (Consumer Secret)
        access_token: Access Token padrão do usuário (OAuth 1.0a)
        access_token_secret: Access Token Secret padrão do usuário
        upload_url: Endpoint único de upload de mídia (INIT/APPEND/FINALIZE/STATUS)
        api_base_url: URL base da API v2
        api_version: Versão da API v2
        request_timeout_seconds: Timeout por requisição HTTP
        media_category: Categoria enviada no INIT/APPEND
        chunk_size_bytes: Tamanho de cada segmento do APPEND
        status_max_attempts: Máximo de consultas STATUS durante processamento
        status_default_delay_seconds: Espera padrão entre consultas STATUS
        default_post_text: Texto usado quando o chamador não informa texto
    """

    # Credenciais
    api_key: str = ""
    api_secret: str = ""
    access_token: str = ""
    access_token_secret: str = ""

    # API
    upload_url: str = TWITTER_UPLOAD_URL
    api_base_url: str = TWITTER_API_BASE_URL
    api_version: str = TWITTER_API_VERSION

    # Timeouts
    request_timeout_seconds: float = 30.0

    # Upload chunked
    media_category: str = DEFAULT_MEDIA_CATEGORY
    chunk_size_bytes: int = DEFAULT_CHUNK_SIZE_BYTES
    status_max_attempts: int = 30
    status_default_delay_seconds: float = 5.0

    # Publicação
    default_post_text: str = DEFAULT_POST_TEXT

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def users_me_endpoint(self) -> str:
        """URL do endpoint de identidade do usuário autenticado."""
        return f"{self.api_endpoint}/users/me"

    @property
    def tweets_endpoint(self) -> str:
        """URL do endpoint de criação de posts."""
        return f"{self.api_endpoint}/tweets"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Twitter.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key or not self.api_secret:
            errors.append("TWITTER_API_KEY/TWITTER_API_SECRET não configurados")

        if not self.access_token or not self.access_token_secret:
            errors.append(
                "TWITTER_ACCESS_TOKEN/TWITTER_ACCESS_TOKEN_SECRET não configurados"
            )

        if self.request_timeout_seconds <= 0:
            errors.append("TWITTER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.chunk_size_bytes <= 0:
            errors.append("TWITTER_CHUNK_SIZE_BYTES deve ser > 0")

        if self.status_max_attempts <= 0:
            errors.append("TWITTER_STATUS_MAX_ATTEMPTS deve ser > 0")

        if self.status_default_delay_seconds < 0:
            errors.append("TWITTER_STATUS_DEFAULT_DELAY_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> TwitterSettings:
    """Carrega TwitterSettings de variáveis de ambiente."""
    return TwitterSettings(
        api_key=os.getenv("TWITTER_API_KEY", ""),
        api_secret=os.getenv("TWITTER_API_SECRET", ""),
        access_token=os.getenv("TWITTER_ACCESS_TOKEN", ""),
        access_token_secret=os.getenv("TWITTER_ACCESS_TOKEN_SECRET", ""),
        upload_url=os.getenv("TWITTER_UPLOAD_URL", TWITTER_UPLOAD_URL),
        api_base_url=os.getenv("TWITTER_API_BASE_URL", TWITTER_API_BASE_URL),
        api_version=os.getenv("TWITTER_API_VERSION", TWITTER_API_VERSION),
        request_timeout_seconds=float(
            os.getenv("TWITTER_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        media_category=os.getenv("TWITTER_MEDIA_CATEGORY", DEFAULT_MEDIA_CATEGORY),
        chunk_size_bytes=int(
            os.getenv("TWITTER_CHUNK_SIZE_BYTES", str(DEFAULT_CHUNK_SIZE_BYTES))
        ),
        status_max_attempts=int(os.getenv("TWITTER_STATUS_MAX_ATTEMPTS", "30")),
        status_default_delay_seconds=float(
            os.getenv("TWITTER_STATUS_DEFAULT_DELAY_SECONDS", "5")
        ),
        default_post_text=os.getenv("TWITTER_DEFAULT_POST_TEXT", DEFAULT_POST_TEXT),
    )


@lru_cache(maxsize=1)
def get_twitter_settings() -> TwitterSettings:
    """Retorna instância cacheada de TwitterSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
