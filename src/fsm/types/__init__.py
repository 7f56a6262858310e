"""
Exports públicos do módulo fsm/types.

Tipos para registrar transições da sessão de upload.
"""

from fsm.types.transition import InvalidTransitionError, StateTransition

__all__ = [
    "InvalidTransitionError",
    "StateTransition",
]
