"""Cliente da API pública da Kick e receptor de webhooks."""

from kick_api.auth import AppCredential, KickOAuth, UserCredential, requires
from kick_api.client import KickClient
from kick_api.constants import KickEventType, Scope
from kick_api.errors import KickAPIError, KickError
from kick_api.webhooks import (
    EventDispatcher,
    KickWebhookReceiver,
    WebhookVerifier,
    create_webhook_app,
    serve,
)

__version__ = "0.1.0"

__all__ = [
    "AppCredential",
    "EventDispatcher",
    "KickAPIError",
    "KickClient",
    "KickError",
    "KickEventType",
    "KickOAuth",
    "KickWebhookReceiver",
    "Scope",
    "UserCredential",
    "WebhookVerifier",
    "create_webhook_app",
    "requires",
    "serve",
]
