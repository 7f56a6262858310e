"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_publish_video_use_case

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()

    use_case = get_publish_video_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_twitter_settings

if TYPE_CHECKING:
    from app.use_cases.twitter import PublishVideoUseCase

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"twitter: {error}" for error in get_twitter_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": base.environment,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_publish_video_use_case() -> PublishVideoUseCase:
    """Obtém use case de publicação de vídeo (singleton)."""
    from app.bootstrap.twitter_factory import create_publish_video_use_case

    return create_publish_video_use_case()
