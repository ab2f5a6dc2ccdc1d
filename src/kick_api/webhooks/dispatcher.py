"""Registro de inscrições e despacho de eventos verificados.

Cada broadcaster inscrito tem uma tabela de formatters (fixada pela
variante da credencial usada no primeiro registro) e uma tabela de
handlers por tipo de evento. Eventos sem inscrito ou sem handler são
descartados em silêncio.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from kick_api.constants import KickEventType
from kick_api.webhooks.formatters import (
    Formatter,
    create_event_formatters,
    create_moderation_event_formatters,
)

if TYPE_CHECKING:
    from kick_api.client import KickClient
    from kick_api.webhooks.events import VerifiedEvent

logger = logging.getLogger(__name__)

EventHandler: TypeAlias = Callable[[dict[str, Any]], Any]


@dataclass(slots=True)
class Subscriber:
    formatters: dict[KickEventType, Formatter]
    handlers: dict[KickEventType, EventHandler] = field(default_factory=dict)


class EventDispatcher:
    """Despacha eventos verificados para os handlers registrados."""

    def __init__(self) -> None:
        self._subscribers: dict[int, Subscriber] = {}
        self._lock = threading.Lock()

    def is_registered(self, broadcaster_id: int, event_type: KickEventType | str) -> bool:
        with self._lock:
            subscriber = self._subscribers.get(broadcaster_id)
            return subscriber is not None and KickEventType(event_type) in subscriber.handlers

    async def register(
        self,
        event_type: KickEventType | str,
        broadcaster_id: int,
        client: KickClient,
        handler: EventHandler,
    ) -> None:
        """Inscreve o cliente no evento e registra o handler.

        Credencial de aplicação inscreve nomeando o broadcaster; credencial
        delegada inscreve o próprio usuário. Um novo handler para o mesmo
        tipo substitui o anterior.

        Raises:
            KickAPIError: Se a chamada de inscrição falhar (nada é registrado).
        """
        kind = KickEventType(event_type)
        delegated = client.is_delegated
        await client.events.create_subscriptions(
            [kind],
            broadcaster_user_id=None if delegated else broadcaster_id,
        )

        with self._lock:
            subscriber = self._subscribers.get(broadcaster_id)
            if subscriber is None:
                formatters = (
                    create_moderation_event_formatters(client)
                    if delegated
                    else create_event_formatters(client)
                )
                subscriber = Subscriber(formatters=formatters)
                self._subscribers[broadcaster_id] = subscriber
            subscriber.handlers[kind] = handler

        logger.info(
            "kick_event_handler_registered",
            extra={
                "event_type": str(kind),
                "broadcaster_id": broadcaster_id,
                "delegated": delegated,
            },
        )

    async def on_inbound_event(self, event: VerifiedEvent) -> bool:
        """Entrega o evento ao handler registrado.

        Returns:
            True se um handler foi chamado, False se o evento foi descartado.
        """
        with self._lock:
            subscriber = self._subscribers.get(event.broadcaster_id)
            handler = subscriber.handlers.get(event.event_type) if subscriber else None
            formatter = subscriber.formatters[event.event_type] if subscriber else None

        if handler is None or formatter is None:
            logger.debug(
                "kick_event_dropped",
                extra={
                    "event_type": str(event.event_type),
                    "broadcaster_id": event.broadcaster_id,
                },
            )
            return False

        result = handler(formatter(event.payload))
        if inspect.isawaitable(result):
            await result
        return True
