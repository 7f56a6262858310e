"""Máquina de estados do upload chunked: INIT → APPEND(*) → FINALIZE.

Cada fase recebe a sessão atual e devolve a próxima; nenhuma fase faz
retry. Qualquer falha leva a sessão a FAILED e é levantada como
InitFailed/AppendFailed/FinalizeFailed com o erro original em `cause`.
A sessão nunca é retomada e nenhuma chamada de limpeza é emitida.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.errors import (
    AppendFailed,
    EmptyMediaError,
    FinalizeFailed,
    InitFailed,
    UsageError,
)
from app.domain.media_responses import (
    MediaFinalizeResponse,
    MediaInitResponse,
    parse_response,
)
from app.domain.media_upload import (
    CHUNK_SIZE_BYTES,
    MediaUploadSession,
    ProcessingState,
)
from app.protocols.http_gateway import GatewayError
from app.protocols.request_signer import SigningError
from app.services.chunk_sequencer import split_into_chunks
from fsm import UploadState

if TYPE_CHECKING:
    from app.domain.credentials import TokenPair
    from app.domain.media_upload import Chunk
    from app.protocols.http_gateway import GatewayRequest, HttpGatewayProtocol
    from app.protocols.payload_builder import MediaRequestBuilderProtocol
    from app.protocols.request_signer import RequestSignerProtocol

logger = logging.getLogger(__name__)


class UploadSessionMachine:
    """Conduz uma sessão de upload do CREATED até SUCCEEDED ou PROCESSING.

    Os APPENDs são estritamente sequenciais e em ordem de índice: o
    protocolo remoto exige entrega ordenada dos segmentos.
    """

    def __init__(
        self,
        signer: RequestSignerProtocol,
        gateway: HttpGatewayProtocol,
        builder: MediaRequestBuilderProtocol,
        chunk_size: int = CHUNK_SIZE_BYTES,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size deve ser > 0")
        self._signer = signer
        self._gateway = gateway
        self._builder = builder
        self._chunk_size = chunk_size

    async def run_upload(
        self,
        buffer: bytes | bytearray | memoryview,
        file_name: str,
        content_type: str,
        owner_user_id: str | None,
        token_pair: TokenPair,
    ) -> MediaUploadSession:
        """Executa INIT, todos os APPENDs e o FINALIZE.

        Returns:
            Sessão em SUCCEEDED, ou em PROCESSING quando a plataforma
            reportou processamento assíncrono (resolvido pelo poller).

        Raises:
            EmptyMediaError: Buffer vazio (nenhuma chamada é feita)
            UsageError: token_pair incompleto
            InitFailed | AppendFailed | FinalizeFailed: Falha de fase
        """
        total_bytes = memoryview(buffer).nbytes
        if total_bytes == 0:
            raise EmptyMediaError()
        if not token_pair.is_complete:
            raise UsageError("token_pair incompleto")

        session = MediaUploadSession(
            total_bytes=total_bytes,
            content_type=content_type,
            file_name=file_name,
            chunk_size=self._chunk_size,
        )
        logger.info("media_upload_started", extra=session.to_log_dict())

        session = await self.initialize(session, owner_user_id, token_pair)
        for chunk in split_into_chunks(buffer, self._chunk_size):
            session = await self.append(session, chunk, token_pair)
        return await self.finalize(session, token_pair)

    async def initialize(
        self,
        session: MediaUploadSession,
        owner_user_id: str | None,
        token_pair: TokenPair,
    ) -> MediaUploadSession:
        """CREATED → INITIALIZED, atribuindo media_id."""
        request = self._builder.build_init(session, owner_user_id)
        try:
            payload = await self._send_signed(request, token_pair)
            init = parse_response(MediaInitResponse, payload)
        except (GatewayError, SigningError) as exc:
            failed = session.advance(UploadState.FAILED, "init_failed", _error_meta(exc))
            logger.warning("media_init_failed", extra=_failure_extra(failed, exc))
            raise InitFailed("INIT falhou", failed, exc) from exc

        session = session.advance(
            UploadState.INITIALIZED,
            "init_ok",
            media_id=init.media_id_string,
        )
        logger.info("media_init_ok", extra={"media_id": session.media_id})
        return session

    async def append(
        self,
        session: MediaUploadSession,
        chunk: Chunk,
        token_pair: TokenPair,
    ) -> MediaUploadSession:
        """Envia um segmento; o último segmento leva a sessão a FINALIZING."""
        if session.media_id is None:
            raise UsageError("APPEND exige sessão inicializada")
        if chunk.index != session.next_segment_index:
            raise UsageError(
                f"segmento fora de ordem: esperado {session.next_segment_index}, "
                f"recebido {chunk.index}"
            )

        if session.state is UploadState.INITIALIZED:
            session = session.advance(UploadState.APPENDING, "append_started")

        request = self._builder.build_append(session.media_id, chunk)
        try:
            await self._send_signed(request, token_pair)
        except (GatewayError, SigningError) as exc:
            meta = {**_error_meta(exc), "segment_index": chunk.index}
            failed = session.advance(UploadState.FAILED, "append_failed", meta)
            logger.warning(
                "media_append_failed",
                extra={**_failure_extra(failed, exc), "segment_index": chunk.index},
            )
            raise AppendFailed(
                f"APPEND do segmento {chunk.index} falhou",
                failed,
                exc,
                index=chunk.index,
            ) from exc

        next_index = chunk.index + 1
        is_last = next_index >= session.segment_count
        session = session.advance(
            UploadState.FINALIZING if is_last else UploadState.APPENDING,
            "append_ok",
            {"segment_index": chunk.index},
            next_segment_index=next_index,
        )
        logger.debug(
            "media_append_ok",
            extra={
                "media_id": session.media_id,
                "segment_index": chunk.index,
                "segment_bytes": len(chunk),
            },
        )
        return session

    async def finalize(
        self,
        session: MediaUploadSession,
        token_pair: TokenPair,
    ) -> MediaUploadSession:
        """FINALIZING → PROCESSING (processing_info presente) ou SUCCEEDED."""
        if session.media_id is None:
            raise UsageError("FINALIZE exige sessão inicializada")

        request = self._builder.build_finalize(session.media_id)
        try:
            payload = await self._send_signed(request, token_pair)
            result = parse_response(MediaFinalizeResponse, payload)
        except (GatewayError, SigningError) as exc:
            failed = session.advance(UploadState.FAILED, "finalize_failed", _error_meta(exc))
            logger.warning("media_finalize_failed", extra=_failure_extra(failed, exc))
            raise FinalizeFailed("FINALIZE falhou", failed, exc) from exc

        info = result.processing_info
        if info is None or info.state is ProcessingState.SUCCEEDED:
            session = session.advance(UploadState.SUCCEEDED, "finalize_ok")
        else:
            session = session.advance(
                UploadState.PROCESSING,
                "finalize_processing",
                {"processing_state": info.state.value},
                processing=info.to_status(),
            )

        logger.info(
            "media_finalize_ok",
            extra={"media_id": session.media_id, "state": session.state.name},
        )
        return session

    async def _send_signed(
        self,
        request: GatewayRequest,
        token_pair: TokenPair,
    ) -> dict[str, Any]:
        # Nonce/timestamp novos a cada chamada
        authorization = self._signer.sign(
            request.url,
            request.method,
            token_pair,
            request.signable_body_params,
        )
        return await self._gateway.send(request.with_header("Authorization", authorization))


def _error_meta(exc: Exception) -> dict[str, Any]:
    return {
        "error_type": type(exc).__name__,
        "status_code": getattr(exc, "status_code", None),
    }


def _failure_extra(session: MediaUploadSession, exc: Exception) -> dict[str, Any]:
    return {**session.to_log_dict(), **_error_meta(exc)}
