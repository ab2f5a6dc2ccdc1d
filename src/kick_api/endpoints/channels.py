"""Canais: consulta e atualização de metadados da livestream."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from kick_api.auth.permissions import requires
from kick_api.constants import Scope
from kick_api.endpoints.base import EndpointGroup, check_max_items
from kick_api.endpoints.categories import CategoryRef
from kick_api.errors import EmptyResponseError
from kick_api.http.wire import WireContract

MAX_CHANNEL_FILTERS = 50
MAX_SLUG_LENGTH = 25


class ChannelStream(BaseModel):
    custom_tags: list[str] | None = None
    is_live: bool
    is_mature: bool
    key: str
    language: str
    start_time: datetime
    thumbnail: str
    url: str
    viewer_count: int


class Channel(BaseModel):
    banner_picture: str
    broadcaster_user_id: int
    category: CategoryRef
    channel_description: str
    slug: str
    stream: ChannelStream
    stream_title: str


class LivestreamMetadataUpdate(BaseModel):
    category_id: int | None = None
    custom_tags: list[str] | None = None
    stream_title: str | None = Field(default=None, min_length=1)


_CHANNELS = WireContract[list[Channel]](list[Channel])
_METADATA_UPDATE = WireContract[LivestreamMetadataUpdate](LivestreamMetadataUpdate)


class ChannelsAPI(EndpointGroup):
    async def get_authenticated_channel(self) -> dict[str, Any]:
        """Canal do usuário dono da credencial delegada."""
        channels = await self._api.execute(
            "channels",
            response_contract=_CHANNELS,
            requirement=requires(Scope.CHANNEL_READ, delegated=True),
        )
        if not channels:
            raise EmptyResponseError(
                "A API não retornou o canal do usuário autenticado",
                endpoint="channels",
                method="GET",
            )
        return channels[0]

    async def get_by_broadcaster_ids(self, *broadcaster_ids: int) -> list[dict[str, Any]]:
        check_max_items(broadcaster_ids, MAX_CHANNEL_FILTERS, "broadcaster IDs")
        return await self._api.execute(
            "channels",
            params={"broadcaster_user_id": list(broadcaster_ids)},
            response_contract=_CHANNELS,
            requirement=requires(Scope.CHANNEL_READ),
        )

    async def get_by_slugs(self, *slugs: str) -> list[dict[str, Any]]:
        check_max_items(slugs, MAX_CHANNEL_FILTERS, "slugs")
        if any(len(slug) > MAX_SLUG_LENGTH for slug in slugs):
            raise ValueError(f"Um slug não pode ter mais de {MAX_SLUG_LENGTH} caracteres")
        return await self._api.execute(
            "channels",
            params={"slug": list(slugs)},
            response_contract=_CHANNELS,
            requirement=requires(Scope.CHANNEL_READ),
        )

    async def update_livestream_metadata(
        self,
        *,
        category_id: int | None = None,
        custom_tags: list[str] | None = None,
        stream_title: str | None = None,
    ) -> None:
        await self._api.execute(
            "channels",
            "PATCH",
            {"categoryId": category_id, "customTags": custom_tags, "streamTitle": stream_title},
            request_contract=_METADATA_UPDATE,
            requirement=requires(Scope.CHANNEL_WRITE, delegated=True),
        )
