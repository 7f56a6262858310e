"""Resolução do user id do chamador via GET /2/users/me."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.errors import IdentityLookupError, UsageError
from app.domain.media_responses import UserMeResponse, parse_response
from app.protocols.http_gateway import GatewayError

if TYPE_CHECKING:
    from app.protocols.http_gateway import HttpGatewayProtocol
    from app.protocols.payload_builder import MediaRequestBuilderProtocol

logger = logging.getLogger(__name__)


class UserIdentityResolver:
    """Obtém o id do usuário dono do bearer token (usado em additional_owners)."""

    def __init__(
        self,
        gateway: HttpGatewayProtocol,
        builder: MediaRequestBuilderProtocol,
    ) -> None:
        self._gateway = gateway
        self._builder = builder

    async def resolve_user_id(self, bearer_token: str) -> str:
        if not bearer_token or not bearer_token.strip():
            raise UsageError("bearer_token é obrigatório")

        request = self._builder.build_user_me(bearer_token)
        try:
            payload = await self._gateway.send(request)
            me = parse_response(UserMeResponse, payload)
        except GatewayError as exc:
            logger.warning(
                "user_identity_lookup_failed",
                extra={"error_type": type(exc).__name__, "status_code": exc.status_code},
            )
            raise IdentityLookupError("falha ao obter user id", exc) from exc

        return me.data.id
