"""
Exports públicos do módulo fsm/states.

Estados canônicos da sessão de upload chunked.
"""

from fsm.states.upload import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    UploadState,
    is_terminal,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "UploadState",
    "is_terminal",
    "is_valid_state",
]
