"""
Módulo FSM — Máquina de estados da sessão de upload chunked.

A FSM é determinística: o mapa VALID_TRANSITIONS define o grafo e cada
fase do upload devolve uma nova sessão em vez de mutar a anterior.

Estrutura:
    - states/: Definições dos estados (UploadState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - types/: Registro de transições (StateTransition)
"""

from fsm.states import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    UploadState,
    is_terminal,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import (
    InvalidTransitionError,
    StateTransition,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "InvalidTransitionError",
    "StateTransition",
    "UploadState",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_state",
    "validate_transition_map",
]
