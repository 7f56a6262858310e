"""
Estados canônicos de uma sessão de upload chunked de mídia.

Uma sessão nasce em CREATED, percorre INIT → APPEND(*) → FINALIZE e,
quando a plataforma exige processamento assíncrono, fica em PROCESSING
até o polling decidir SUCCEEDED ou FAILED.
"""

from enum import StrEnum


class UploadState(StrEnum):
    """
    Estados de uma MediaUploadSession.

    Estados não-terminais:
        - CREATED: Sessão local criada, nenhuma chamada remota feita
        - INITIALIZED: INIT aceito, media_id atribuído
        - APPENDING: Segmentos sendo enviados em ordem
        - FINALIZING: Todos os segmentos enviados, FINALIZE pendente
        - PROCESSING: Plataforma processando a mídia (polling STATUS)

    Estados terminais:
        - SUCCEEDED: Mídia pronta para ser referenciada em um post
        - FAILED: Alguma fase falhou; a sessão nunca é retomada
    """

    CREATED = "CREATED"
    INITIALIZED = "INITIALIZED"
    APPENDING = "APPENDING"
    FINALIZING = "FINALIZING"
    PROCESSING = "PROCESSING"

    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


# Uma vez em estado terminal, a sessão não transita mais
TERMINAL_STATES: frozenset[UploadState] = frozenset({
    UploadState.SUCCEEDED,
    UploadState.FAILED,
})

DEFAULT_INITIAL_STATE: UploadState = UploadState.CREATED


def is_terminal(state: UploadState) -> bool:
    """Verifica se o estado é terminal (sessão encerrada)."""
    return state in TERMINAL_STATES


def is_valid_state(state: UploadState) -> bool:
    """Verifica se o valor é um UploadState válido."""
    return isinstance(state, UploadState)
