"""Formatação dos payloads de eventos para os handlers.

Um formatter converte o payload wire validado para domínio (camelCase,
datas como ``datetime``) e troca os usuários citados no evento por objetos
com ações ligadas ao cliente que fez a inscrição:

- Credencial de aplicação: ``get_channel()`` e ``get_livestream()``.
- Credencial delegada: também ``ban()``, ``timeout()`` e ``remove_ban()``
  no canal do evento, e ``update()`` / ``delete()`` na recompensa resgatada.

Os wrappers são subclasses de dict: comparam e serializam como o payload.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

from kick_api.constants import KickEventType
from kick_api.webhooks.events import EVENT_CONTRACTS

if TYPE_CHECKING:
    from kick_api.client import KickClient

Formatter: TypeAlias = Callable[[dict[str, Any]], dict[str, Any]]

# Caminhos (em camelCase) dos usuários citados em cada tipo de evento
_ACTOR_PATHS: dict[KickEventType, tuple[tuple[str, ...], ...]] = {
    KickEventType.CHAT_MESSAGE_SENT: (("sender",), ("repliesTo", "sender")),
    KickEventType.CHANNEL_FOLLOWED: (("follower",),),
    KickEventType.SUBSCRIPTION_RENEWAL: (("subscriber",),),
    KickEventType.SUBSCRIPTION_GIFTS: (("gifter",), ("giftees",)),
    KickEventType.SUBSCRIPTION_NEW: (("subscriber",),),
    KickEventType.REWARD_REDEMPTION_UPDATED: (("redeemer",),),
    KickEventType.LIVESTREAM_STATUS_UPDATED: (),
    KickEventType.LIVESTREAM_METADATA_UPDATED: (),
    KickEventType.MODERATION_BANNED: (("bannedUser",),),
    KickEventType.KICKS_GIFTED: (("sender",),),
}


class EventUser(dict):
    """Usuário citado em um evento, com consultas de leitura."""

    def __init__(self, data: dict[str, Any], client: KickClient) -> None:
        super().__init__(data)
        self._client = client

    @property
    def user_id(self) -> int:
        return self["userId"]

    async def get_channel(self) -> dict[str, Any] | None:
        """Canal do usuário, ou None se a API não retornar nenhum."""
        channels = await self._client.channels.get_by_broadcaster_ids(self.user_id)
        return channels[0] if channels else None

    async def get_livestream(self) -> dict[str, Any] | None:
        """Livestream atual do usuário, ou None se estiver offline."""
        livestreams = await self._client.livestreams.get_livestreams(
            broadcaster_user_id=self.user_id
        )
        return livestreams[0] if livestreams else None


class ModeratableUser(EventUser):
    """Usuário citado em um evento, moderável no canal do evento."""

    def __init__(self, data: dict[str, Any], client: KickClient, broadcaster_id: int) -> None:
        super().__init__(data, client)
        self._broadcaster_id = broadcaster_id

    async def ban(self, reason: str | None = None) -> None:
        await self._client.moderation.ban_user(self._broadcaster_id, self.user_id, reason)

    async def timeout(self, duration: int, reason: str | None = None) -> None:
        """Silencia o usuário por ``duration`` minutos."""
        await self._client.moderation.timeout_user(
            self._broadcaster_id, self.user_id, duration, reason
        )

    async def remove_ban(self) -> None:
        await self._client.moderation.remove_ban(self._broadcaster_id, self.user_id)


class ManagedReward(dict):
    """Recompensa resgatada, editável pelo dono do canal."""

    def __init__(self, data: dict[str, Any], client: KickClient) -> None:
        super().__init__(data)
        self._client = client

    async def update(self, **changes: Any) -> dict[str, Any]:
        return await self._client.channel_rewards.update_reward(self["id"], **changes)

    async def delete(self) -> None:
        await self._client.channel_rewards.delete_reward(self["id"])


def _wrap_path(
    node: dict[str, Any],
    path: tuple[str, ...],
    wrap: Callable[[dict[str, Any]], dict[str, Any]],
) -> None:
    key, rest = path[0], path[1:]
    value = node.get(key)
    if value is None:
        return
    if rest:
        _wrap_path(value, rest, wrap)
    elif isinstance(value, list):
        node[key] = [wrap(item) for item in value]
    elif "userId" in value:
        # Gifter anônimo fica apenas {"isAnonymous": True}
        node[key] = wrap(value)


def _make_formatter(
    event_type: KickEventType,
    client: KickClient,
    *,
    moderation: bool,
) -> Formatter:
    contract = EVENT_CONTRACTS[event_type]
    paths = _ACTOR_PATHS[event_type]

    def format_payload(payload: dict[str, Any]) -> dict[str, Any]:
        data = contract.to_domain(payload)
        broadcaster_id = data["broadcaster"]["userId"]

        def wrap(user: dict[str, Any]) -> dict[str, Any]:
            if moderation:
                return ModeratableUser(user, client, broadcaster_id)
            return EventUser(user, client)

        for path in paths:
            _wrap_path(data, path, wrap)
        if moderation and event_type == KickEventType.REWARD_REDEMPTION_UPDATED:
            data["reward"] = ManagedReward(data["reward"], client)
        return data

    return format_payload


def create_event_formatters(client: KickClient) -> dict[KickEventType, Formatter]:
    """Tabela de formatters com ações de leitura (credencial de aplicação)."""
    return {
        event_type: _make_formatter(event_type, client, moderation=False)
        for event_type in KickEventType
    }


def create_moderation_event_formatters(client: KickClient) -> dict[KickEventType, Formatter]:
    """Tabela de formatters com ações de moderação (credencial delegada)."""
    return {
        event_type: _make_formatter(event_type, client, moderation=True)
        for event_type in KickEventType
    }
