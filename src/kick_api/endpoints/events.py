"""Inscrições de eventos (entregues via webhook)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel

from kick_api.constants import KickEventType
from kick_api.endpoints.base import EndpointGroup
from kick_api.http.wire import WireContract

if TYPE_CHECKING:
    from collections.abc import Iterable

EVENT_VERSION = 1


class EventSubscription(BaseModel):
    app_id: str
    broadcaster_user_id: int
    created_at: datetime
    event: KickEventType
    id: str
    method: str
    updated_at: datetime
    version: int


class _EventRef(BaseModel):
    name: KickEventType
    version: int


class CreateSubscriptionsRequest(BaseModel):
    broadcaster_user_id: int | None = None
    events: list[_EventRef]
    method: Literal["webhook"]


class CreatedSubscription(BaseModel):
    subscription_id: str
    name: KickEventType
    version: int


_SUBSCRIPTIONS = WireContract[list[EventSubscription]](list[EventSubscription])
_CREATE = WireContract[CreateSubscriptionsRequest](CreateSubscriptionsRequest)
_CREATED = WireContract[list[CreatedSubscription]](list[CreatedSubscription])


class EventsAPI(EndpointGroup):
    async def list_subscriptions(
        self, broadcaster_user_id: int | None = None
    ) -> list[dict[str, Any]]:
        return await self._api.execute(
            "events/subscriptions",
            params={"broadcaster_user_id": broadcaster_user_id},
            response_contract=_SUBSCRIPTIONS,
        )

    async def create_subscriptions(
        self,
        events: Iterable[KickEventType | str],
        broadcaster_user_id: int | None = None,
    ) -> list[dict[str, Any]]:
        """Inscreve o app para receber eventos via webhook.

        Com credencial de aplicação, ``broadcaster_user_id`` identifica o
        canal; com credencial delegada, a inscrição é do próprio usuário.
        """
        return await self._api.execute(
            "events/subscriptions",
            "POST",
            {
                "broadcasterUserId": broadcaster_user_id,
                "events": [
                    {"name": KickEventType(event), "version": EVENT_VERSION} for event in events
                ],
                "method": "webhook",
            },
            request_contract=_CREATE,
            response_contract=_CREATED,
        )
