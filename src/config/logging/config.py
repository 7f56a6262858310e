"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Formatação padronizada
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do processo (app/bootstrap/)
    configure_logging(level="INFO", service_name="publicador_midia")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("media_upload_started", extra={"total_bytes": 42})

Logs estruturados, sem tokens, segredos ou bytes de mídia.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "publicador_midia"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do processo (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do upload em andamento (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.

    Args:
        name: Nome do logger (geralmente __name__).

    Returns:
        Logger configurado.
    """
    return logging.getLogger(name)


def log_phase_outcome(
    logger: logging.Logger,
    phase: str,
    outcome: str,
    elapsed_ms: float | None = None,
    **fields: object,
) -> None:
    """Log observável do desfecho de uma fase do upload (sem PII).

    Sucesso vai para INFO; qualquer outro desfecho vai para WARNING.

    Args:
        logger: Logger instance.
        phase: Fase do fluxo (ex: "init", "append", "poll", "publish").
        outcome: Desfecho (ex: "ok", "failed", "attempts_exhausted").
        elapsed_ms: Tempo decorrido em ms (quando aplicável).
        **fields: Campos adicionais seguros (ids, contadores).

    Exemplo:
        log_phase_outcome(logger, "append", "failed", segment_index=2)
    """
    extra: dict[str, object] = {"phase": phase, "outcome": outcome, **fields}
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    level = logging.INFO if outcome == "ok" else logging.WARNING
    logger.log(level, "media_publish_%s_%s", phase, outcome, extra=extra)
