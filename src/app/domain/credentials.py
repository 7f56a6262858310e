"""Credenciais por requisição usadas na assinatura OAuth 1.0a."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenPair:
    """Access token/secret do usuário, informado a cada upload.

    O par consumer (api key/secret) é fixo no processo e fica no signer;
    este par varia por chamador.
    """

    key: str
    secret: str

    def __repr__(self) -> str:
        # Nunca expor segredos em logs/tracebacks
        return "TokenPair(key=***, secret=***)"

    @property
    def is_complete(self) -> bool:
        """True se key e secret estão preenchidos."""
        return bool(self.key and self.key.strip() and self.secret and self.secret.strip())
