"""Recepção de webhooks da Kick: assinatura, contratos, despacho e transporte."""

from kick_api.webhooks.dispatcher import EventDispatcher, EventHandler, Subscriber
from kick_api.webhooks.events import EVENT_CONTRACTS, VerifiedEvent, parse_event
from kick_api.webhooks.formatters import (
    EventUser,
    ManagedReward,
    ModeratableUser,
    create_event_formatters,
    create_moderation_event_formatters,
)
from kick_api.webhooks.receiver import KickWebhookReceiver
from kick_api.webhooks.router import create_webhook_app, create_webhook_router, serve
from kick_api.webhooks.signature import WebhookVerifier

__all__ = [
    "EVENT_CONTRACTS",
    "EventDispatcher",
    "EventHandler",
    "EventUser",
    "KickWebhookReceiver",
    "ManagedReward",
    "ModeratableUser",
    "Subscriber",
    "VerifiedEvent",
    "WebhookVerifier",
    "create_event_formatters",
    "create_moderation_event_formatters",
    "create_webhook_app",
    "create_webhook_router",
    "parse_event",
    "serve",
]
