"""Grupos de endpoints da API pública (call sites sobre o pipeline)."""

from kick_api.endpoints.categories import CategoriesAPI
from kick_api.endpoints.channel_rewards import ChannelRewardsAPI
from kick_api.endpoints.channels import ChannelsAPI
from kick_api.endpoints.chat import ChatAPI
from kick_api.endpoints.events import EventsAPI
from kick_api.endpoints.kicks import KicksAPI
from kick_api.endpoints.livestreams import LivestreamsAPI
from kick_api.endpoints.moderation import ModerationAPI
from kick_api.endpoints.users import UsersAPI

__all__ = [
    "CategoriesAPI",
    "ChannelRewardsAPI",
    "ChannelsAPI",
    "ChatAPI",
    "EventsAPI",
    "KicksAPI",
    "LivestreamsAPI",
    "ModerationAPI",
    "UsersAPI",
]
