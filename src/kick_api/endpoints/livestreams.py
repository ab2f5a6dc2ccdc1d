"""Livestreams em andamento."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from kick_api.endpoints.base import EndpointGroup, check_max_items
from kick_api.endpoints.categories import CategoryRef
from kick_api.http.wire import WireContract

MAX_BROADCASTER_FILTERS = 50


class Livestream(BaseModel):
    broadcaster_user_id: int
    category: CategoryRef
    channel_id: int
    custom_tags: list[str] | None = None
    has_mature_content: bool
    language: str
    slug: str
    started_at: datetime
    stream_title: str
    thumbnail: str
    viewer_count: int


class LivestreamQuery(BaseModel):
    broadcaster_user_id: int | list[int] | None = None
    category_id: int | None = None
    language: str | None = None
    limit: int | None = Field(default=None, ge=1, le=100)
    sort: Literal["viewer_count", "started_at"] | None = None


_LIVESTREAMS = WireContract[list[Livestream]](list[Livestream])
_QUERY = WireContract[LivestreamQuery](LivestreamQuery)


class LivestreamsAPI(EndpointGroup):
    async def get_livestreams(
        self,
        *,
        broadcaster_user_id: int | list[int] | None = None,
        category_id: int | None = None,
        language: str | None = None,
        limit: int | None = None,
        sort: Literal["viewer_count", "started_at"] | None = None,
    ) -> list[dict[str, Any]]:
        """Lista livestreams ao vivo, com filtros opcionais.

        Raises:
            ValueError: Filtros fora dos limites da API.
        """
        if isinstance(broadcaster_user_id, list):
            check_max_items(
                tuple(broadcaster_user_id), MAX_BROADCASTER_FILTERS, "broadcaster IDs"
            )
        try:
            params = _QUERY.to_wire(
                {
                    "broadcasterUserId": broadcaster_user_id,
                    "categoryId": category_id,
                    "language": language,
                    "limit": limit,
                    "sort": sort,
                }
            )
        except ValueError as exc:
            raise ValueError(f"Filtros de livestream inválidos: {exc}") from exc
        return await self._api.execute(
            "livestreams",
            params=params,
            response_contract=_LIVESTREAMS,
        )
