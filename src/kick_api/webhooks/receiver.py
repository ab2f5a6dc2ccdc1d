"""Recepção de webhooks: autenticação, validação e despacho.

Independente de framework: ``handle`` recebe headers e corpo bruto e
devolve o status HTTP a responder. O transporte (FastAPI) fica em
``kick_api.webhooks.router``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kick_api.constants import (
    HEADER_EVENT_TYPE,
    HEADER_MESSAGE_ID,
    HEADER_MESSAGE_TIMESTAMP,
    HEADER_SIGNATURE,
)
from kick_api.errors import InvalidEventError, UnauthenticatedEventError
from kick_api.webhooks.dispatcher import EventDispatcher
from kick_api.webhooks.events import parse_event
from kick_api.webhooks.signature import WebhookVerifier

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kick_api.client import KickClient
    from kick_api.constants import KickEventType
    from kick_api.webhooks.dispatcher import EventHandler

logger = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_UNAUTHORIZED = 401
STATUS_INTERNAL_ERROR = 500


class KickWebhookReceiver:
    """Receptor de eventos da Kick.

    Cada instância tem sua própria chave confiável e seu próprio registro
    de inscritos; várias podem coexistir no mesmo processo.

    Args:
        verifier: WebhookVerifier. Se None, usa a chave configurada/bootstrap.
        dispatcher: EventDispatcher. Se None, cria um vazio.
    """

    def __init__(
        self,
        verifier: WebhookVerifier | None = None,
        dispatcher: EventDispatcher | None = None,
    ) -> None:
        self.verifier = verifier or WebhookVerifier()
        self.dispatcher = dispatcher or EventDispatcher()

    async def register(
        self,
        event_type: KickEventType | str,
        broadcaster_id: int,
        client: KickClient,
        handler: EventHandler,
    ) -> None:
        await self.dispatcher.register(event_type, broadcaster_id, client, handler)

    async def aclose(self) -> None:
        await self.verifier.aclose()

    async def handle(self, headers: Mapping[str, str], raw_body: bytes) -> int:
        """Processa uma entrega de webhook.

        Returns:
            200 se processado ou descartado, 400 se o evento é inválido,
            401 se não autenticado, 500 se o handler falhou.
        """
        normalized = {key.lower(): value for key, value in headers.items()}
        message_id = normalized.get(HEADER_MESSAGE_ID)

        try:
            await self.verifier.verify(
                message_id,
                normalized.get(HEADER_MESSAGE_TIMESTAMP),
                raw_body,
                normalized.get(HEADER_SIGNATURE),
            )
        except UnauthenticatedEventError as exc:
            logger.warning(
                "kick_webhook_unauthenticated",
                extra={"message_id": message_id, "reason": exc.reason},
            )
            return STATUS_UNAUTHORIZED

        try:
            event = parse_event(normalized.get(HEADER_EVENT_TYPE), raw_body)
        except InvalidEventError as exc:
            logger.warning(
                "kick_webhook_invalid_event",
                extra={"message_id": message_id, "reason": exc.reason},
            )
            return STATUS_BAD_REQUEST

        try:
            dispatched = await self.dispatcher.on_inbound_event(event)
        except Exception:
            logger.exception(
                "kick_webhook_handler_failed",
                extra={
                    "message_id": message_id,
                    "event_type": str(event.event_type),
                    "broadcaster_id": event.broadcaster_id,
                },
            )
            return STATUS_INTERNAL_ERROR

        logger.info(
            "kick_webhook_received",
            extra={
                "message_id": message_id,
                "event_type": str(event.event_type),
                "broadcaster_id": event.broadcaster_id,
                "dispatched": dispatched,
            },
        )
        return STATUS_OK
