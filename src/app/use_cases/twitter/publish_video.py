"""Use case de upload chunked de vídeo seguido da publicação do post.

Ponto de entrada único para a camada web (fora deste pacote):
identidade → upload (INIT/APPEND/FINALIZE) → polling (se necessário) → post.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.errors import EmptyMediaError, UsageError
from app.observability import correlation_scope
from config.logging import log_phase_outcome
from config.settings.twitter import DEFAULT_POST_TEXT
from fsm import UploadState

if TYPE_CHECKING:
    from app.domain.credentials import TokenPair
    from app.services import (
        PostPublisher,
        ProcessingPoller,
        UploadSessionMachine,
        UserIdentityResolver,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PublishVideoResult:
    """Resultado de um upload publicado com sucesso."""

    post_id: str
    media_id: str
    segments: int
    processed_async: bool
    correlation_id: str


class PublishVideoUseCase:
    """Orquestra identidade, upload, polling e publicação.

    Falhas são levantadas como os erros tipados de app.domain.errors,
    sem retry e sem chamada de limpeza da sessão remota.
    """

    def __init__(
        self,
        identity: UserIdentityResolver,
        uploader: UploadSessionMachine,
        poller: ProcessingPoller,
        publisher: PostPublisher,
        default_token_pair: TokenPair | None = None,
        default_text: str = DEFAULT_POST_TEXT,
    ) -> None:
        self._identity = identity
        self._uploader = uploader
        self._poller = poller
        self._publisher = publisher
        self._default_token_pair = default_token_pair
        self._default_text = default_text

    async def execute(
        self,
        buffer: bytes | bytearray | memoryview,
        file_name: str,
        content_type: str,
        bearer_token: str,
        text: str | None = None,
        token_pair: TokenPair | None = None,
    ) -> PublishVideoResult:
        """Faz o upload do buffer e publica um post com a mídia.

        Args:
            buffer: Bytes do vídeo (>= 1 byte)
            file_name: Nome original do arquivo
            content_type: MIME type enviado como media_type
            bearer_token: Token OAuth 2.0 do chamador (identidade e post)
            text: Texto do post; usa o texto padrão se vazio
            token_pair: Par OAuth 1.0a do chamador; usa o par padrão se None

        Raises:
            UsageError: Entrada inválida (nenhuma chamada remota é feita)
            OrchestratorError: Falha tipada da fase correspondente
        """
        pair = token_pair or self._default_token_pair
        if len(buffer) == 0:
            raise EmptyMediaError()
        if not bearer_token or not bearer_token.strip():
            raise UsageError("bearer_token é obrigatório")
        if pair is None or not pair.is_complete:
            raise UsageError("token_pair não informado e sem par padrão configurado")

        with correlation_scope() as correlation_id:
            started = time.perf_counter()
            phase = "identity"
            try:
                owner_user_id = await self._identity.resolve_user_id(bearer_token)

                phase = "upload"
                session = await self._uploader.run_upload(
                    buffer, file_name, content_type, owner_user_id, pair
                )
                processed_async = session.state is UploadState.PROCESSING

                if processed_async:
                    phase = "poll"
                    session = await self._poller.poll_session(session, pair)

                phase = "publish"
                post_id = await self._publisher.publish(
                    session.media_id,
                    text or self._default_text,
                    bearer_token,
                )
            except Exception as exc:
                log_phase_outcome(
                    logger,
                    getattr(exc, "phase", phase),
                    "failed",
                    _elapsed_ms(started),
                    error_type=type(exc).__name__,
                )
                raise

            log_phase_outcome(
                logger,
                "publish",
                "ok",
                _elapsed_ms(started),
                media_id=session.media_id,
                post_id=post_id,
                segments=session.segment_count,
            )
            return PublishVideoResult(
                post_id=post_id,
                media_id=session.media_id,
                segments=session.segment_count,
                processed_async=processed_async,
                correlation_id=correlation_id,
            )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
