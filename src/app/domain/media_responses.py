"""Schemas das respostas da Twitter API usadas no fluxo de upload.

Campos desconhecidos são ignorados; campos obrigatórios ausentes viram
MalformedResponseError via parse_response().
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain.media_upload import ProcessingState, ProcessingStatus
from app.protocols.http_gateway import MalformedResponseError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ProcessingInfo(BaseModel):
    """Bloco processing_info de FINALIZE/STATUS."""

    model_config = ConfigDict(extra="ignore")

    state: ProcessingState = Field(..., description="Estado do processamento.")
    check_after_secs: int | None = Field(
        default=None,
        ge=0,
        description="Espera sugerida pelo servidor antes da próxima consulta.",
    )
    progress_percent: int | None = Field(default=None, ge=0, le=100)
    error: dict[str, Any] | None = Field(default=None)

    def to_status(self) -> ProcessingStatus:
        error_message = None
        if self.error:
            error_message = str(self.error.get("message") or self.error.get("name") or "")
        return ProcessingStatus(
            state=self.state,
            check_after_secs=self.check_after_secs,
            progress_percent=self.progress_percent,
            error_message=error_message or None,
        )


class MediaInitResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    media_id_string: str = Field(..., min_length=1)
    expires_after_secs: int | None = None


class MediaFinalizeResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    media_id_string: str = Field(..., min_length=1)
    size: int | None = None
    processing_info: ProcessingInfo | None = None


class MediaStatusResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    media_id_string: str | None = None
    processing_info: ProcessingInfo | None = None


class _IdData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)


class UserMeResponse(BaseModel):
    """Resposta de GET /2/users/me."""

    model_config = ConfigDict(extra="ignore")

    data: _IdData


class TweetCreateResponse(BaseModel):
    """Resposta de POST /2/tweets."""

    model_config = ConfigDict(extra="ignore")

    data: _IdData


def parse_response(model: type[ModelT], payload: dict[str, Any]) -> ModelT:
    """Valida o payload contra o schema esperado.

    Raises:
        MalformedResponseError: Se o payload não corresponde ao schema.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"resposta fora do schema {model.__name__}: {exc.error_count()} erro(s)"
        ) from exc
