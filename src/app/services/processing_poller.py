"""Polling do processamento assíncrono da mídia após o FINALIZE.

Único componente com disciplina de espera: o intervalo é ditado pelo
servidor (check_after_secs), não exponencial. Só continua em
pending/in_progress (ou STATUS sem processing_info); falhas do gateway
viram StatusQueryFailed, sem retry.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.domain.errors import (
    AttemptsExhausted,
    PollError,
    RemoteFailed,
    StatusQueryFailed,
    UsageError,
)
from app.domain.media_responses import MediaStatusResponse, parse_response
from app.domain.media_upload import ProcessingState
from app.protocols.http_gateway import GatewayError
from app.protocols.request_signer import SigningError
from fsm import UploadState

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.domain.credentials import TokenPair
    from app.domain.media_upload import MediaUploadSession, ProcessingStatus
    from app.protocols.http_gateway import HttpGatewayProtocol
    from app.protocols.payload_builder import MediaRequestBuilderProtocol
    from app.protocols.request_signer import RequestSignerProtocol

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 30
DEFAULT_DELAY_SECONDS = 5.0


class ProcessingPoller:
    """Consulta STATUS até succeeded, failed ou esgotar as tentativas.

    Args:
        signer: Assinador OAuth 1.0a
        gateway: Gateway HTTP
        builder: Builder das requisições STATUS
        max_attempts: Máximo de consultas STATUS
        default_delay_seconds: Espera quando nem servidor nem chamador informam
        sleep: Suspensão cooperativa (asyncio.sleep por padrão)
    """

    def __init__(
        self,
        signer: RequestSignerProtocol,
        gateway: HttpGatewayProtocol,
        builder: MediaRequestBuilderProtocol,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        default_delay_seconds: float = DEFAULT_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        if max_attempts <= 0:
            raise ValueError("max_attempts deve ser > 0")
        self._signer = signer
        self._gateway = gateway
        self._builder = builder
        self._max_attempts = max_attempts
        self._default_delay = default_delay_seconds
        self._sleep = sleep

    async def poll_until_ready(
        self,
        media_id: str,
        initial_delay: float | None,
        token_pair: TokenPair,
    ) -> bool:
        """Retorna True quando o processamento termina com sucesso.

        STATUS sem processing_info não é terminal: conta como tentativa e
        espera initial_delay antes da próxima consulta.

        Args:
            media_id: Mídia em processamento
            initial_delay: Espera usada quando o STATUS não traz check_after_secs
            token_pair: Access token/secret do chamador

        Raises:
            RemoteFailed: A plataforma reportou state=failed
            AttemptsExhausted: max_attempts consultas sem estado terminal
            StatusQueryFailed: Falha do gateway/assinatura na consulta (sem retry)
        """
        fallback_delay = self._default_delay if initial_delay is None else initial_delay

        for attempt in range(1, self._max_attempts + 1):
            try:
                status = await self._check_status(media_id, token_pair)
            except (GatewayError, SigningError) as exc:
                logger.warning(
                    "media_status_query_failed",
                    extra={
                        "media_id": media_id,
                        "attempt": attempt,
                        "error_type": type(exc).__name__,
                        "status_code": getattr(exc, "status_code", None),
                    },
                )
                raise StatusQueryFailed(media_id, attempt, exc) from exc

            state = status.state if status is not None else None
            if state is ProcessingState.SUCCEEDED:
                logger.info(
                    "media_processing_succeeded",
                    extra={"media_id": media_id, "attempts": attempt},
                )
                return True

            if state is ProcessingState.FAILED:
                logger.warning(
                    "media_processing_failed",
                    extra={"media_id": media_id, "attempts": attempt},
                )
                raise RemoteFailed(media_id, attempt, status.error_message)

            if attempt == self._max_attempts:
                break

            delay = (
                status.check_after_secs
                if status is not None and status.check_after_secs is not None
                else fallback_delay
            )
            logger.debug(
                "media_processing_pending",
                extra={
                    "media_id": media_id,
                    "attempt": attempt,
                    "processing_state": state.value if state is not None else None,
                    "progress_percent": status.progress_percent if status else None,
                    "delay_seconds": delay,
                },
            )
            await self._sleep(delay)

        logger.warning(
            "media_processing_attempts_exhausted",
            extra={"media_id": media_id, "attempts": self._max_attempts},
        )
        raise AttemptsExhausted(media_id, self._max_attempts)

    async def poll_session(
        self,
        session: MediaUploadSession,
        token_pair: TokenPair,
    ) -> MediaUploadSession:
        """Resolve uma sessão em PROCESSING para SUCCEEDED ou FAILED.

        Usa o check_after_secs do FINALIZE como espera padrão. Em caso de
        PollError a sessão vai para FAILED e segue anexada ao erro.
        """
        if session.state is not UploadState.PROCESSING or session.media_id is None:
            raise UsageError("poll_session exige sessão em PROCESSING")

        processing = session.processing
        try:
            if processing is not None and processing.state is ProcessingState.FAILED:
                raise RemoteFailed(session.media_id, 0, processing.error_message)

            initial_delay = (
                processing.check_after_secs
                if processing is not None and processing.check_after_secs is not None
                else self._default_delay
            )
            await self.poll_until_ready(session.media_id, initial_delay, token_pair)
        except PollError as exc:
            exc.session = session.advance(
                UploadState.FAILED,
                "processing_failed",
                {"error_type": type(exc).__name__, "attempts": exc.attempts},
            )
            raise

        return session.advance(UploadState.SUCCEEDED, "processing_succeeded")

    async def _check_status(
        self,
        media_id: str,
        token_pair: TokenPair,
    ) -> ProcessingStatus | None:
        request = self._builder.build_status(media_id)
        authorization = self._signer.sign(request.url, request.method, token_pair)
        payload = await self._gateway.send(request.with_header("Authorization", authorization))
        response = parse_response(MediaStatusResponse, payload)
        if response.processing_info is None:
            return None
        return response.processing_info.to_status()
