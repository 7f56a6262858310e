"""Taxonomia de erros do fluxo de upload e publicação.

Cada erro informa a fase em que ocorreu (`phase`) para diagnóstico;
erros de fase carregam o GatewayError/SigningError original em `cause`
(também encadeado via `raise ... from`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.media_upload import MediaUploadSession


class OrchestratorError(Exception):
    """Base de todos os erros expostos pelo ponto de entrada."""

    phase: str = "unknown"


class UsageError(OrchestratorError, ValueError):
    """Entrada inválida do chamador; nenhuma chamada remota é feita."""

    phase = "validation"


class EmptyMediaError(UsageError):
    """Buffer vazio: uma sessão exige ao menos 1 byte."""

    def __init__(self) -> None:
        super().__init__("buffer de mídia vazio")


class UploadError(OrchestratorError):
    """Falha em INIT/APPEND/FINALIZE; a sessão é abortada sem retomada."""

    def __init__(
        self,
        message: str,
        session: MediaUploadSession,
        cause: Exception,
    ) -> None:
        super().__init__(message)
        self.session = session
        self.cause = cause

    @property
    def media_id(self) -> str | None:
        return self.session.media_id


class InitFailed(UploadError):
    phase = "init"


class AppendFailed(UploadError):
    phase = "append"

    def __init__(
        self,
        message: str,
        session: MediaUploadSession,
        cause: Exception,
        index: int,
    ) -> None:
        super().__init__(message, session, cause)
        self.index = index


class FinalizeFailed(UploadError):
    phase = "finalize"


class PollError(OrchestratorError):
    """Desfecho terminal do polling sem sucesso.

    `session` é a sessão já em FAILED quando o erro sai de poll_session.
    """

    phase = "poll"

    def __init__(
        self,
        message: str,
        media_id: str,
        attempts: int,
        session: MediaUploadSession | None = None,
    ) -> None:
        super().__init__(message)
        self.media_id = media_id
        self.attempts = attempts
        self.session = session


class RemoteFailed(PollError):
    """A plataforma rejeitou explicitamente a mídia (state=failed)."""

    def __init__(
        self,
        media_id: str,
        attempts: int,
        error_message: str | None = None,
        session: MediaUploadSession | None = None,
    ) -> None:
        super().__init__(
            f"processamento da mídia falhou: {error_message or 'sem detalhes'}",
            media_id,
            attempts,
            session,
        )
        self.error_message = error_message


class AttemptsExhausted(PollError):
    """O sistema desistiu de esperar após esgotar as tentativas."""

    def __init__(
        self,
        media_id: str,
        attempts: int,
        session: MediaUploadSession | None = None,
    ) -> None:
        super().__init__(
            f"processamento não concluiu após {attempts} consultas",
            media_id,
            attempts,
            session,
        )


class StatusQueryFailed(PollError):
    """A consulta STATUS falhou (gateway ou assinatura); sem nova tentativa."""

    def __init__(
        self,
        media_id: str,
        attempts: int,
        cause: Exception,
        session: MediaUploadSession | None = None,
    ) -> None:
        super().__init__(
            f"consulta STATUS falhou na tentativa {attempts}: {type(cause).__name__}",
            media_id,
            attempts,
            session,
        )
        self.cause = cause


class PublishError(OrchestratorError):
    """Falha na publicação do post."""

    phase = "publish"

    def __init__(self, message: str, cause: Exception) -> None:
        super().__init__(message)
        self.cause = cause


class IdentityLookupError(OrchestratorError):
    """Falha ao obter o user id do chamador (additional_owners)."""

    phase = "identity"

    def __init__(self, message: str, cause: Exception) -> None:
        super().__init__(message)
        self.cause = cause
