"""Parsing dos corpos de erro da Twitter API (v1.1 e v2)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TwitterApiError:
    """Erro retornado pela Twitter API."""

    code: int | None
    message: str
    title: str | None = None


def parse_twitter_errors(response_data: Any) -> list[TwitterApiError]:
    """Extrai erros do corpo da resposta.

    Formatos suportados:
    - v1.1: {"errors": [{"code": 324, "message": "..."}]}
    - v1.1 (mídia): {"error": "..."}
    - v2 (problem): {"title": "...", "detail": "...", "status": 403}

    Returns:
        Lista de erros (vazia se o corpo não descreve erro)
    """
    if not isinstance(response_data, dict):
        return []

    errors_obj = response_data.get("errors")
    if isinstance(errors_obj, list):
        return [
            TwitterApiError(
                code=item.get("code"),
                message=str(item.get("message") or item.get("detail") or ""),
                title=item.get("title"),
            )
            for item in errors_obj
            if isinstance(item, dict)
        ]

    if isinstance(response_data.get("error"), str):
        return [TwitterApiError(code=None, message=response_data["error"])]

    if "title" in response_data and "detail" in response_data:
        return [
            TwitterApiError(
                code=response_data.get("status"),
                message=str(response_data["detail"]),
                title=str(response_data["title"]),
            )
        ]

    return []
