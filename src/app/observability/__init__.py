"""Observabilidade — correlation id dos uploads para logs estruturados."""

from app.observability.correlation import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
)

__all__ = [
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
]
