"""KICKs (moeda de presentes) do canal."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from kick_api.auth.permissions import requires
from kick_api.constants import Scope
from kick_api.endpoints.base import EndpointGroup
from kick_api.http.wire import WireContract

MAX_LEADERBOARD_TOP = 100


class KicksEntry(BaseModel):
    gifted_amount: int
    rank: int
    user_id: int
    username: str


class KicksLeaderboard(BaseModel):
    lifetime: list[KicksEntry]
    month: list[KicksEntry]
    week: list[KicksEntry]


_LEADERBOARD = WireContract[KicksLeaderboard](KicksLeaderboard)


class KicksAPI(EndpointGroup):
    async def get_leaderboard(self, top: int | None = None) -> dict[str, Any]:
        """Ranking de KICKs do canal (vitalício, mês e semana)."""
        if top is not None and not 1 <= top <= MAX_LEADERBOARD_TOP:
            raise ValueError(f"top deve estar entre 1 e {MAX_LEADERBOARD_TOP}")
        return await self._api.execute(
            "kicks/leaderboard",
            params={"top": top},
            response_contract=_LEADERBOARD,
            requirement=requires(Scope.KICKS_READ),
        )
