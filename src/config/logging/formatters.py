"""Formatters de logging estruturado.

Define o formatter JSON com campos obrigatórios:
correlation_id, service, timestamp (asctime), level, logger (name), message.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-17 10:30:00,000",
            "level": "INFO",
            "logger": "app.services.upload_session",
            "message": "media_init_ok",
            "correlation_id": "abc-123",
            "service": "publicador_midia",
            "media_id": "1880028106020515840"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
