"""Recompensas do canal (channel points)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from kick_api.auth.permissions import requires
from kick_api.constants import Scope
from kick_api.endpoints.base import EndpointGroup
from kick_api.http.wire import WireContract

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"

_REWARDS_WRITE = requires(Scope.CHANNEL_REWARDS_WRITE, delegated=True)


class ChannelReward(BaseModel):
    background_color: str
    cost: int
    description: str
    id: str
    is_enabled: bool
    is_paused: bool
    is_user_input_required: bool
    should_redemptions_skip_request_queue: bool
    title: str


class ChannelRewardUpdate(BaseModel):
    background_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    cost: int | None = Field(default=None, ge=1)
    description: str | None = Field(default=None, max_length=200)
    is_enabled: bool | None = None
    is_paused: bool | None = None
    is_user_input_required: bool | None = None
    should_redemptions_skip_request_queue: bool | None = None
    title: str | None = Field(default=None, max_length=50)


class ChannelRewardCreate(ChannelRewardUpdate):
    cost: int = Field(ge=1)
    title: str = Field(max_length=50)


_REWARD = WireContract[ChannelReward](ChannelReward)
_REWARDS = WireContract[list[ChannelReward]](list[ChannelReward])
_CREATE = WireContract[ChannelRewardCreate](ChannelRewardCreate)
_UPDATE = WireContract[ChannelRewardUpdate](ChannelRewardUpdate)


def _reward_body(**fields: Any) -> dict[str, Any]:
    return {
        "backgroundColor": fields.get("background_color"),
        "cost": fields.get("cost"),
        "description": fields.get("description"),
        "isEnabled": fields.get("is_enabled"),
        "isPaused": fields.get("is_paused"),
        "isUserInputRequired": fields.get("is_user_input_required"),
        "shouldRedemptionsSkipRequestQueue": fields.get(
            "should_redemptions_skip_request_queue"
        ),
        "title": fields.get("title"),
    }


class ChannelRewardsAPI(EndpointGroup):
    async def get_rewards(self) -> list[dict[str, Any]]:
        return await self._api.execute(
            "channels/rewards",
            response_contract=_REWARDS,
            requirement=_REWARDS_WRITE,
        )

    async def create_reward(
        self,
        *,
        title: str,
        cost: int,
        description: str | None = None,
        background_color: str | None = None,
        is_enabled: bool | None = None,
        is_user_input_required: bool | None = None,
        should_redemptions_skip_request_queue: bool | None = None,
    ) -> dict[str, Any]:
        body = _reward_body(
            title=title,
            cost=cost,
            description=description,
            background_color=background_color,
            is_enabled=is_enabled,
            is_user_input_required=is_user_input_required,
            should_redemptions_skip_request_queue=should_redemptions_skip_request_queue,
        )
        return await self._api.execute(
            "channels/rewards",
            "POST",
            body,
            request_contract=_CREATE,
            response_contract=_REWARD,
            requirement=_REWARDS_WRITE,
        )

    async def update_reward(self, reward_id: str, **changes: Any) -> dict[str, Any]:
        """Atualiza parcialmente uma recompensa.

        Args:
            reward_id: ID da recompensa.
            **changes: Campos snake_case de ChannelRewardUpdate
                (ex: ``cost=200, is_paused=True``).
        """
        unknown = set(changes) - set(ChannelRewardUpdate.model_fields)
        if unknown:
            raise ValueError(f"Campos desconhecidos: {', '.join(sorted(unknown))}")
        return await self._api.execute(
            f"channels/rewards/{reward_id}",
            "PATCH",
            _reward_body(**changes),
            request_contract=_UPDATE,
            response_contract=_REWARD,
            requirement=_REWARDS_WRITE,
        )

    async def delete_reward(self, reward_id: str) -> None:
        await self._api.execute(
            f"channels/rewards/{reward_id}",
            "DELETE",
            requirement=_REWARDS_WRITE,
        )
