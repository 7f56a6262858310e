"""
Tipos para registrar transições da sessão de upload.

Cada fase do upload devolve uma nova sessão carregando o histórico
imutável de StateTransition, útil para diagnóstico e logs.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.upload import UploadState


class InvalidTransitionError(RuntimeError):
    """Transição fora do mapa VALID_TRANSITIONS (erro de programação)."""

    def __init__(self, from_state: UploadState, to_state: UploadState) -> None:
        super().__init__(f"Transição inválida: {from_state.name} → {to_state.name}")
        self.from_state = from_state
        self.to_state = to_state


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Registro imutável de uma mudança de estado.

    Attributes:
        from_state: Estado de origem da transição
        to_state: Estado de destino da transição
        trigger: Identificador do gatilho (ex: 'init_ok', 'append_failed')
        metadata: Dados adicionais para diagnóstico (nunca tokens ou bytes)
        timestamp: Momento da transição (UTC)
    """

    from_state: UploadState
    to_state: UploadState
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Retorna representação segura para logs."""
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }
