"""Configuração centralizada de logging.

Uso:
    from kick_api.config.logging import configure_logging

    configure_logging(level="INFO", service_name="meu_bot")

    logger = logging.getLogger(__name__)
    logger.info("kick_request_completed", extra={"endpoint": "channels"})

A biblioteca apenas emite logs; configurar handlers é decisão da aplicação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kick_api.config.logging.filters import CorrelationIdFilter
from kick_api.config.logging.formatters import create_json_formatter
from kick_api.config.settings import get_kick_settings
from kick_api.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "kick_api"


def configure_logging(
    level: str | None = None,
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Padrão: KickSettings.log_level (KICK_LOG_LEVEL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Padrão: ContextVar de kick_api.observability.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    if level is None:
        level = get_kick_settings().log_level
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter or get_correlation_id)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um caminho de fallback foi acionado (sem dados sensíveis).

    Args:
        logger: Logger do módulo chamador.
        component: Componente que aplicou o fallback (ex: "webhook_signature").
        reason: Motivo curto (ex: "public_key_refetch").
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    logger.info("Fallback applied for %s", component, extra=extra)
