"""Transporte HTTP dos webhooks (FastAPI) e hospedagem com uvicorn.

Uso:
    receiver = KickWebhookReceiver()
    await receiver.register(KickEventType.CHAT_MESSAGE_SENT, 42, kick, on_chat)
    await serve(receiver)
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import APIRouter, FastAPI, Request, Response

from kick_api.config.settings import get_kick_settings
from kick_api.constants import HEADER_MESSAGE_ID
from kick_api.observability import reset_correlation_id, set_correlation_id
from kick_api.webhooks.receiver import KickWebhookReceiver

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "x-correlation-id"


def create_webhook_router(receiver: KickWebhookReceiver, path: str = "/") -> APIRouter:
    """Cria router com o endpoint POST de recebimento de eventos.

    O corpo é lido bruto: a assinatura cobre os bytes exatos enviados.
    Nenhuma resposta carrega corpo.
    """
    router = APIRouter()

    @router.post(path, response_model=None)
    async def receive_event(request: Request) -> Response:
        headers = request.headers
        correlation_id = headers.get(CORRELATION_HEADER) or headers.get(HEADER_MESSAGE_ID)
        token = set_correlation_id(correlation_id)
        try:
            raw_body = await request.body()
            status_code = await receiver.handle(headers, raw_body)
            return Response(status_code=status_code)
        finally:
            reset_correlation_id(token)

    return router


def create_webhook_app(receiver: KickWebhookReceiver, path: str | None = None) -> FastAPI:
    """Cria aplicação ASGI com o endpoint de webhook.

    Args:
        receiver: Receptor que processa os eventos.
        path: Caminho do endpoint. Padrão: settings.webhook_path.
    """
    app = FastAPI(title="kick-api webhooks", docs_url=None, redoc_url=None, openapi_url=None)
    app.include_router(create_webhook_router(receiver, path or get_kick_settings().webhook_path))
    app.state.receiver = receiver
    return app


async def serve(
    receiver: KickWebhookReceiver,
    host: str | None = None,
    port: int | None = None,
    path: str | None = None,
) -> None:
    """Sobe o receptor com uvicorn até o processo ser interrompido."""
    settings = get_kick_settings()
    config = uvicorn.Config(
        create_webhook_app(receiver, path),
        host=host or settings.webhook_host,
        port=port or settings.webhook_port,
        log_config=None,
    )
    logger.info(
        "kick_webhook_server_starting",
        extra={"host": config.host, "port": config.port},
    )
    try:
        await uvicorn.Server(config).serve()
    finally:
        await receiver.aclose()
