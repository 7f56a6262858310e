"""Correlation id por upload, injetado nos logs.

Usa ContextVar: uploads concorrentes no mesmo event loop não compartilham
o valor.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope() as correlation_id:
        ...  # todo log emitido aqui carrega o mesmo correlation_id
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior ao sair.

    Args:
        correlation_id: ID a usar. Se None, gera um novo UUID.
    """
    value = correlation_id or generate_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
