"""Constantes e enums de domínio da API pública da Kick."""

from __future__ import annotations

from enum import StrEnum

KICK_API_BASE_URL: str = "https://api.kick.com/public/v1"
KICK_OAUTH_BASE_URL: str = "https://id.kick.com/oauth"
KICK_PUBLIC_KEY_PATH: str = "public-key"

# Chave de assinatura publicada pela Kick; substituída em runtime se houver rotação
KICK_BOOTSTRAP_PUBLIC_KEY: str = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAq/+l1WnlRrGSolDMA+A8
6rAhMbQGmQ2SapVcGM3zq8ANXjnhDWocMqfWcTd95btDydITa10kDvHzw9WQOqp2
MZI7ZyrfzJuz5nhTPCiJwTwnEtWft7nV14BYRDHvlfqPUaZ+1KR4OCaO/wWIk/rQ
L/TjY0M70gse8rlBkbo2a8rKhu69RQTRsoaf4DVhDPEeSeI5jVrRDGAMGL3cGuyY
6CLKGdjVEM78g3JfYOvDU/RvfqD7L89TZ3iN94jrmWdGz34JNlEI5hqK8dd7C5EF
BEbZ5jgB8s8ReQV8H+MkuffjdAj3ajDDX3DOJMIut1lBrUVD1AaSrGCKHooWoL2e
twIDAQAB
-----END PUBLIC KEY-----
"""

# Headers do webhook (comparação case-insensitive)
HEADER_MESSAGE_ID = "kick-event-message-id"
HEADER_MESSAGE_TIMESTAMP = "kick-event-message-timestamp"
HEADER_SIGNATURE = "kick-event-signature"
HEADER_EVENT_TYPE = "kick-event-type"


class KickEventType(StrEnum):
    """Tipos de evento entregues via webhook."""

    CHAT_MESSAGE_SENT = "chat.message.sent"
    CHANNEL_FOLLOWED = "channel.followed"
    SUBSCRIPTION_RENEWAL = "channel.subscription.renewal"
    SUBSCRIPTION_GIFTS = "channel.subscription.gifts"
    SUBSCRIPTION_NEW = "channel.subscription.new"
    REWARD_REDEMPTION_UPDATED = "channel.reward.redemption.updated"
    LIVESTREAM_STATUS_UPDATED = "livestream.status.updated"
    LIVESTREAM_METADATA_UPDATED = "livestream.metadata.updated"
    MODERATION_BANNED = "moderation.banned"
    KICKS_GIFTED = "kicks.gifted"


class Scope(StrEnum):
    """Scopes OAuth conhecidos.

    Tokens podem carregar scopes fora desta lista; por isso credenciais
    armazenam strings e o enum serve apenas como catálogo.
    """

    USER_READ = "user:read"
    CHANNEL_READ = "channel:read"
    CHANNEL_WRITE = "channel:write"
    CHANNEL_REWARDS_WRITE = "channel:rewards:write"
    CHAT_WRITE = "chat:write"
    STREAMKEY_READ = "streamkey:read"
    EVENTS_SUBSCRIBE = "events:subscribe"
    MODERATION_BAN = "moderation:ban"
    MODERATION_CHAT_MESSAGE_MANAGE = "moderation:chat_message:manage"
    KICKS_READ = "kicks:read"
