"""Helpers de logging para a Twitter API (sem tokens ou corpos)."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def _safe_endpoint(url: str) -> str:
    # Query string pode carregar media_id; mantemos só host + path
    parts = urlsplit(url)
    return f"{parts.netloc}{parts.path}"


def log_gateway_error(
    method: str,
    url: str,
    error_kind: str,
    status_code: int | None = None,
    error_codes: list[int] | None = None,
) -> None:
    """Loga falha do gateway sem expor dados sensíveis."""
    logger.warning(
        "twitter_http_error",
        extra={
            "method": method,
            "endpoint": _safe_endpoint(url),
            "error_kind": error_kind,
            "status_code": status_code,
            "error_codes": error_codes or [],
        },
    )


def log_success(method: str, url: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "twitter_http_ok",
        extra={
            "method": method,
            "endpoint": _safe_endpoint(url),
            "status_code": status_code,
        },
    )
