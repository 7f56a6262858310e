"""Modelos de domínio da sessão de upload chunked.

A sessão é um valor imutável: cada fase recebe a sessão atual e devolve
a próxima via advance(), validando a transição contra o mapa da FSM.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from fsm import (
    DEFAULT_INITIAL_STATE,
    InvalidTransitionError,
    StateTransition,
    UploadState,
    is_terminal,
    is_transition_valid,
)

CHUNK_SIZE_BYTES = 5 * 1024 * 1024  # 5 MiB


@dataclass(frozen=True, slots=True)
class Chunk:
    """Segmento do buffer original enviado em um APPEND.

    Attributes:
        index: Posição zero-based (segment_index no protocolo)
        data: View somente leitura sobre o buffer do chamador
    """

    index: int
    data: memoryview

    def __len__(self) -> int:
        return len(self.data)


class ProcessingState(StrEnum):
    """Estados de processamento reportados em processing_info."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ProcessingStatus:
    """Leitura transitória do processamento remoto (não persistida)."""

    state: ProcessingState
    check_after_secs: int | None = None
    progress_percent: int | None = None
    error_message: str | None = None


@dataclass(frozen=True, slots=True)
class MediaUploadSession:
    """Sessão de upload de um item de mídia, do INIT ao estado terminal.

    Attributes:
        total_bytes: Tamanho total do buffer (fixo na criação)
        content_type: MIME type informado pelo chamador (enviado como media_type)
        file_name: Nome original do arquivo
        chunk_size: Tamanho de cada segmento do APPEND
        media_id: Atribuído pelo INIT; imutável depois disso
        state: Estado atual da FSM
        next_segment_index: Próximo segment_index a ser enviado
        processing: Última leitura de processing_info (se houver)
        history: Transições realizadas até aqui
    """

    total_bytes: int
    content_type: str
    file_name: str
    chunk_size: int = CHUNK_SIZE_BYTES
    media_id: str | None = None
    state: UploadState = DEFAULT_INITIAL_STATE
    next_segment_index: int = 0
    processing: ProcessingStatus | None = None
    history: tuple[StateTransition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.total_bytes < 0:
            raise ValueError("total_bytes não pode ser negativo")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size deve ser > 0")

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.state)

    @property
    def segment_count(self) -> int:
        """Quantidade de APPENDs exigida por total_bytes."""
        return -(-self.total_bytes // self.chunk_size)

    def advance(
        self,
        target: UploadState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
        **changes: Any,
    ) -> MediaUploadSession:
        """Retorna a próxima sessão após validar a transição.

        Raises:
            InvalidTransitionError: Se a transição não está no mapa.
            ValueError: Se tentar reatribuir media_id.
        """
        if not is_transition_valid(self.state, target):
            raise InvalidTransitionError(self.state, target)

        new_media_id = changes.get("media_id")
        if self.media_id is not None and new_media_id not in (None, self.media_id):
            raise ValueError("media_id é imutável após o INIT")

        transition = StateTransition(
            from_state=self.state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        return replace(
            self,
            state=target,
            history=(*self.history, transition),
            **changes,
        )

    def to_log_dict(self) -> dict[str, Any]:
        """Resumo seguro para logs (sem bytes de mídia)."""
        return {
            "media_id": self.media_id,
            "state": self.state.name,
            "total_bytes": self.total_bytes,
            "content_type": self.content_type,
            "segments_sent": self.next_segment_index,
            "segment_count": self.segment_count,
        }
