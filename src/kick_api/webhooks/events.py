"""Contratos dos eventos de webhook e parsing do corpo recebido.

Cada tipo de ``KickEventType`` tem seu schema (formato wire, snake_case).
``parse_event`` valida o corpo bruto contra o schema do tipo informado no
header ``Kick-Event-Type`` e devolve um VerifiedEvent, ainda em formato
wire; a conversão para domínio fica com os formatters do dispatcher.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ValidationError

from kick_api.constants import KickEventType
from kick_api.errors import InvalidEventError
from kick_api.http.wire import WireContract

logger = logging.getLogger(__name__)


class ActorProfile(BaseModel):
    """Usuário citado em um evento (sem flag de anonimato)."""

    user_id: int
    username: str
    is_verified: bool
    profile_picture: str
    channel_slug: str


class Actor(ActorProfile):
    is_anonymous: bool


class AnonymousGifter(BaseModel):
    is_anonymous: Literal[True]


class _BroadcasterEvent(BaseModel):
    broadcaster: Actor


class Badge(BaseModel):
    text: str
    type: str
    count: int | None = None


class SenderIdentity(BaseModel):
    username_color: str
    badges: list[Badge]


class ChatSender(Actor):
    identity: SenderIdentity


class ReplyTarget(BaseModel):
    message_id: str
    content: str
    sender: Actor


class EmotePosition(BaseModel):
    s: int
    e: int


class Emote(BaseModel):
    emote_id: str
    positions: list[EmotePosition]


class ChatMessageSentEvent(_BroadcasterEvent):
    message_id: str
    replies_to: ReplyTarget | None
    sender: ChatSender
    content: str
    emotes: list[Emote]


class ChannelFollowedEvent(_BroadcasterEvent):
    follower: Actor


class SubscriptionEvent(_BroadcasterEvent):
    """Renovação ou nova assinatura (mesmo formato)."""

    subscriber: Actor
    duration: int
    created_at: datetime
    expires_at: datetime


class SubscriptionGiftsEvent(_BroadcasterEvent):
    gifter: Actor | AnonymousGifter
    giftees: list[Actor]
    created_at: datetime
    expires_at: datetime | None = None


class RedeemedReward(BaseModel):
    id: str
    title: str
    cost: int
    description: str


class RewardRedemptionUpdatedEvent(BaseModel):
    broadcaster: ActorProfile
    id: str
    user_input: str
    status: Literal["pending", "accepted", "rejected"]
    redeemed_at: datetime
    reward: RedeemedReward
    redeemer: ActorProfile


class LivestreamStatusUpdatedEvent(_BroadcasterEvent):
    is_live: bool
    title: str
    started_at: datetime
    ended_at: datetime | None


class MetadataCategory(BaseModel):
    id: int
    name: str
    thumbnail: str


class LivestreamMetadata(BaseModel):
    title: str
    language: str
    has_mature_content: bool
    category: MetadataCategory


class LivestreamMetadataUpdatedEvent(_BroadcasterEvent):
    metadata: LivestreamMetadata


class BanMetadata(BaseModel):
    reason: str
    created_at: datetime
    expires_at: datetime | None


class ModerationBannedEvent(_BroadcasterEvent):
    moderator: Actor
    banned_user: Actor
    metadata: BanMetadata


class KicksGift(BaseModel):
    amount: int
    name: str
    type: str
    tier: str
    message: str
    pinned_time_seconds: int


class KicksGiftedEvent(BaseModel):
    broadcaster: ActorProfile
    sender: ActorProfile
    gift: KicksGift
    created_at: datetime


EVENT_CONTRACTS: dict[KickEventType, WireContract[Any]] = {
    KickEventType.CHAT_MESSAGE_SENT: WireContract(ChatMessageSentEvent),
    KickEventType.CHANNEL_FOLLOWED: WireContract(ChannelFollowedEvent),
    KickEventType.SUBSCRIPTION_RENEWAL: WireContract(SubscriptionEvent),
    KickEventType.SUBSCRIPTION_GIFTS: WireContract(SubscriptionGiftsEvent),
    KickEventType.SUBSCRIPTION_NEW: WireContract(SubscriptionEvent),
    KickEventType.REWARD_REDEMPTION_UPDATED: WireContract(RewardRedemptionUpdatedEvent),
    KickEventType.LIVESTREAM_STATUS_UPDATED: WireContract(LivestreamStatusUpdatedEvent),
    KickEventType.LIVESTREAM_METADATA_UPDATED: WireContract(LivestreamMetadataUpdatedEvent),
    KickEventType.MODERATION_BANNED: WireContract(ModerationBannedEvent),
    KickEventType.KICKS_GIFTED: WireContract(KicksGiftedEvent),
}


@dataclass(frozen=True, slots=True)
class VerifiedEvent:
    """Evento autenticado e validado, pronto para despacho.

    Attributes:
        event_type: Tipo do evento.
        broadcaster_id: ID do canal a que o evento se refere.
        payload: Corpo em formato wire, já validado pelo contrato do tipo.
    """

    event_type: KickEventType
    broadcaster_id: int
    payload: dict[str, Any]


def parse_event(event_type: str | None, raw_body: bytes) -> VerifiedEvent:
    """Valida o corpo de um evento já autenticado.

    Args:
        event_type: Valor do header Kick-Event-Type.
        raw_body: Corpo bruto da requisição.

    Raises:
        InvalidEventError: Tipo desconhecido, JSON inválido ou corpo fora
            do contrato do tipo.
    """
    try:
        kind = KickEventType(event_type or "")
    except ValueError as exc:
        raise InvalidEventError("unknown_event_type") from exc

    try:
        payload = json.loads(raw_body)
    except ValueError as exc:
        raise InvalidEventError("invalid_json") from exc

    try:
        event = EVENT_CONTRACTS[kind].validate(payload)
    except ValidationError as exc:
        logger.warning(
            "kick_event_contract_violation",
            extra={"event_type": str(kind), "error_count": exc.error_count()},
        )
        raise InvalidEventError("contract_violation") from exc

    return VerifiedEvent(
        event_type=kind,
        broadcaster_id=event.broadcaster.user_id,
        payload=payload,
    )
