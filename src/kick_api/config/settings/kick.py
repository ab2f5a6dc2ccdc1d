"""Settings do cliente Kick.

Credenciais da aplicação, origens da API e parâmetros do receptor de
webhooks, carregados de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from kick_api.constants import KICK_API_BASE_URL, KICK_OAUTH_BASE_URL


@dataclass(frozen=True)
class KickSettings:
    """Configurações do cliente Kick.

    Attributes:
        client_id: Client ID da aplicação registrada na Kick
        client_secret: Client secret da aplicação
        redirect_uri: Redirect URI registrada (fluxo authorization code)
        api_base_url: Origem versionada da API pública
        oauth_base_url: Origem do servidor OAuth
        request_timeout_seconds: Timeout das requisições HTTP
        rate_limit_backoff_seconds: Espera antes de repetir uma chamada com 429
        rate_limit_backoff_max_seconds: Teto da espera (inclusive Retry-After)
        webhook_host: Host do receptor de webhooks
        webhook_port: Porta do receptor de webhooks
        webhook_path: Path do endpoint POST do receptor
        webhook_public_key: PEM que substitui a chave bootstrap (vazio = bootstrap)
        log_level: Nível de log padrão
    """

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""

    api_base_url: str = KICK_API_BASE_URL
    oauth_base_url: str = KICK_OAUTH_BASE_URL

    request_timeout_seconds: float = 30.0
    rate_limit_backoff_seconds: float = 1.0
    rate_limit_backoff_max_seconds: float = 30.0

    webhook_host: str = "0.0.0.0"
    webhook_port: int = 3000
    webhook_path: str = "/"
    webhook_public_key: str = ""

    log_level: str = "INFO"

    def api_url(self, endpoint: str) -> str:
        """Monta URL completa: <origem>/<path versionado>."""
        return f"{self.api_base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.client_id:
            errors.append("KICK_CLIENT_ID não configurado")

        if not self.client_secret:
            errors.append("KICK_CLIENT_SECRET não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("KICK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.rate_limit_backoff_seconds < 0:
            errors.append("KICK_RATE_LIMIT_BACKOFF_SECONDS deve ser >= 0")

        if self.rate_limit_backoff_max_seconds < self.rate_limit_backoff_seconds:
            errors.append(
                "KICK_RATE_LIMIT_BACKOFF_MAX_SECONDS deve ser >= "
                "KICK_RATE_LIMIT_BACKOFF_SECONDS"
            )

        if not 0 < self.webhook_port < 65536:
            errors.append("KICK_WEBHOOK_PORT fora do intervalo 1-65535")

        if not self.webhook_path.startswith("/"):
            errors.append("KICK_WEBHOOK_PATH deve começar com '/'")

        return errors


def _load_from_env() -> KickSettings:
    """Carrega KickSettings a partir de variáveis de ambiente."""
    return KickSettings(
        client_id=os.getenv("KICK_CLIENT_ID", ""),
        client_secret=os.getenv("KICK_CLIENT_SECRET", ""),
        redirect_uri=os.getenv("KICK_REDIRECT_URI", ""),
        api_base_url=os.getenv("KICK_API_BASE_URL", KICK_API_BASE_URL),
        oauth_base_url=os.getenv("KICK_OAUTH_BASE_URL", KICK_OAUTH_BASE_URL),
        request_timeout_seconds=float(os.getenv("KICK_REQUEST_TIMEOUT_SECONDS", "30")),
        rate_limit_backoff_seconds=float(
            os.getenv("KICK_RATE_LIMIT_BACKOFF_SECONDS", "1")
        ),
        rate_limit_backoff_max_seconds=float(
            os.getenv("KICK_RATE_LIMIT_BACKOFF_MAX_SECONDS", "30")
        ),
        webhook_host=os.getenv("KICK_WEBHOOK_HOST", "0.0.0.0"),
        webhook_port=int(os.getenv("KICK_WEBHOOK_PORT", "3000")),
        webhook_path=os.getenv("KICK_WEBHOOK_PATH", "/"),
        webhook_public_key=os.getenv("KICK_WEBHOOK_PUBLIC_KEY", ""),
        log_level=os.getenv("KICK_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_kick_settings() -> KickSettings:
    """Retorna instância cacheada de KickSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
