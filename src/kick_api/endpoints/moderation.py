"""Moderação: banimentos e timeouts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kick_api.auth.permissions import requires
from kick_api.constants import Scope
from kick_api.endpoints.base import EndpointGroup
from kick_api.http.wire import WireContract

# Duração máxima de timeout, em minutos (7 dias)
MAX_TIMEOUT_MINUTES = 10080

_MODERATION_BAN = requires(Scope.MODERATION_BAN, delegated=True)


class RemoveBanRequest(BaseModel):
    broadcaster_user_id: int
    user_id: int


class BanRequest(RemoveBanRequest):
    reason: str | None = Field(default=None, max_length=100)


class TimeoutRequest(BanRequest):
    duration: int = Field(ge=1, le=MAX_TIMEOUT_MINUTES)


_BAN = WireContract[BanRequest](BanRequest)
_TIMEOUT = WireContract[TimeoutRequest](TimeoutRequest)
_REMOVE_BAN = WireContract[RemoveBanRequest](RemoveBanRequest)


class ModerationAPI(EndpointGroup):
    async def ban_user(
        self, broadcaster_user_id: int, user_id: int, reason: str | None = None
    ) -> None:
        await self._api.execute(
            "moderation/bans",
            "POST",
            {"broadcasterUserId": broadcaster_user_id, "userId": user_id, "reason": reason},
            request_contract=_BAN,
            requirement=_MODERATION_BAN,
        )

    async def timeout_user(
        self,
        broadcaster_user_id: int,
        user_id: int,
        duration: int,
        reason: str | None = None,
    ) -> None:
        """Silencia o usuário por ``duration`` minutos."""
        await self._api.execute(
            "moderation/bans",
            "POST",
            {
                "broadcasterUserId": broadcaster_user_id,
                "userId": user_id,
                "duration": duration,
                "reason": reason,
            },
            request_contract=_TIMEOUT,
            requirement=_MODERATION_BAN,
        )

    async def remove_ban(self, broadcaster_user_id: int, user_id: int) -> None:
        await self._api.execute(
            "moderation/bans",
            "DELETE",
            {"broadcasterUserId": broadcaster_user_id, "userId": user_id},
            request_contract=_REMOVE_BAN,
            requirement=_MODERATION_BAN,
        )
