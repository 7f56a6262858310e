"""
Regras de transição válidas entre estados da sessão de upload.

O mapa forma o grafo INIT → APPEND(*) → FINALIZE → (PROCESSING) →
terminal. Qualquer estado não-terminal pode cair em FAILED.
"""

from fsm.states.upload import TERMINAL_STATES, UploadState

TransitionMap = dict[UploadState, frozenset[UploadState]]

# Chave: estado de origem
# Valor: conjunto de estados de destino permitidos
VALID_TRANSITIONS: TransitionMap = {
    # CREATED: INIT aceito ou falhou
    UploadState.CREATED: frozenset({
        UploadState.INITIALIZED,
        UploadState.FAILED,
    }),

    # INITIALIZED: primeiro APPEND
    UploadState.INITIALIZED: frozenset({
        UploadState.APPENDING,
        UploadState.FAILED,
    }),

    # APPENDING: próximo segmento ou último segmento enviado
    UploadState.APPENDING: frozenset({
        UploadState.APPENDING,
        UploadState.FINALIZING,
        UploadState.FAILED,
    }),

    # FINALIZING: com ou sem processamento assíncrono
    UploadState.FINALIZING: frozenset({
        UploadState.PROCESSING,
        UploadState.SUCCEEDED,
        UploadState.FAILED,
    }),

    # PROCESSING: só o polling sai daqui
    UploadState.PROCESSING: frozenset({
        UploadState.PROCESSING,
        UploadState.SUCCEEDED,
        UploadState.FAILED,
    }),

    UploadState.SUCCEEDED: frozenset(),
    UploadState.FAILED: frozenset(),
}


def get_valid_targets(state: UploadState) -> frozenset[UploadState]:
    """Retorna os estados de destino válidos (vazio se terminal)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: UploadState, to_state: UploadState) -> bool:
    """
    Verifica se uma transição é válida segundo o mapa.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino

    Returns:
        True se a transição é permitida, False caso contrário
    """
    # Estados terminais nunca permitem saída
    if from_state in TERMINAL_STATES:
        return False

    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """
    Valida a integridade do mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Todo estado não-terminal pode cair em FAILED

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in UploadState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        targets = VALID_TRANSITIONS.get(state, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {state.name} não deveria ter transições: {targets}"
            )

    for from_state, targets in VALID_TRANSITIONS.items():
        if from_state not in TERMINAL_STATES and UploadState.FAILED not in targets:
            errors.append(f"Estado {from_state.name} não permite transição para FAILED")

    return errors
