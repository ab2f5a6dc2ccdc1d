"""Verificação de assinatura RSA dos webhooks da Kick.

Mensagem assinada: ``<message_id>.<timestamp>.<corpo bruto>`` (bytes exatos,
sem re-serializar o JSON), com RSA PKCS#1 v1.5 / SHA-256.

Se a verificação falhar com a chave atual, a chave pública é buscada UMA
vez na API (a Kick pode rotacionar a chave) e a assinatura é conferida de
novo antes de rejeitar.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import TYPE_CHECKING

import httpx
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from pydantic import BaseModel

from kick_api.config.logging import log_fallback
from kick_api.config.settings import get_kick_settings
from kick_api.constants import KICK_BOOTSTRAP_PUBLIC_KEY, KICK_PUBLIC_KEY_PATH
from kick_api.errors import UnauthenticatedEventError
from kick_api.http.wire import WireContract

if TYPE_CHECKING:
    from kick_api.config.settings import KickSettings

logger = logging.getLogger(__name__)


class _PublicKey(BaseModel):
    public_key: str


class _PublicKeyEnvelope(BaseModel):
    data: _PublicKey


_PUBLIC_KEY = WireContract[_PublicKeyEnvelope](_PublicKeyEnvelope)


def load_public_key(public_key_pem: str) -> rsa.RSAPublicKey:
    """Carrega chave pública RSA em formato PEM.

    Raises:
        ValueError: Se o PEM for inválido ou a chave não for RSA.
    """
    key = serialization.load_pem_public_key(public_key_pem.encode("utf-8"))
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError(f"Chave pública não é RSA: {type(key).__name__}")
    return key


def build_signed_message(message_id: str, timestamp: str, raw_body: bytes) -> bytes:
    return f"{message_id}.{timestamp}.".encode() + raw_body


class WebhookVerifier:
    """Mantém a chave pública confiável e autentica eventos.

    Args:
        public_key_pem: Chave inicial. Padrão: settings.webhook_public_key
            ou a chave bootstrap publicada pela Kick.
        settings: KickSettings opcional. Se None, carrega do ambiente.
        http_client: httpx.AsyncClient usado no refetch da chave.
    """

    def __init__(
        self,
        public_key_pem: str | None = None,
        *,
        settings: KickSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_kick_settings()
        pem = public_key_pem or self._settings.webhook_public_key or KICK_BOOTSTRAP_PUBLIC_KEY
        self._public_key = load_public_key(pem)
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=self._settings.request_timeout_seconds
        )

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self._public_key

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    async def verify(
        self,
        message_id: str | None,
        timestamp: str | None,
        raw_body: bytes,
        signature: str | None,
    ) -> None:
        """Autentica um evento recebido.

        Raises:
            UnauthenticatedEventError: Headers ausentes, assinatura malformada
                ou inválida mesmo após o refetch da chave.
        """
        if not message_id or not timestamp or not signature:
            raise UnauthenticatedEventError("missing_signature_headers")

        try:
            signature_bytes = base64.b64decode(signature, validate=True)
        except (ValueError, binascii.Error) as exc:
            raise UnauthenticatedEventError("malformed_signature") from exc

        message = build_signed_message(message_id, timestamp, raw_body)
        if self._check(self._public_key, message, signature_bytes):
            return

        log_fallback(logger, "webhook_signature", reason="public_key_refetch")
        try:
            refreshed_key = load_public_key(await self.fetch_public_key())
        except (httpx.HTTPError, ValueError, UnsupportedAlgorithm) as exc:
            logger.warning(
                "kick_public_key_fetch_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise UnauthenticatedEventError("public_key_unavailable") from exc

        self._public_key = refreshed_key
        if not self._check(self._public_key, message, signature_bytes):
            raise UnauthenticatedEventError("invalid_signature")

    async def fetch_public_key(self) -> str:
        """Busca a chave pública de assinatura atual (PEM).

        Raises:
            httpx.HTTPError: Falha de rede ou status não-2xx.
            ValueError: Resposta fora do formato esperado.
        """
        response = await self._http_client.get(self._settings.api_url(KICK_PUBLIC_KEY_PATH))
        response.raise_for_status()
        envelope = _PUBLIC_KEY.validate(response.json())
        logger.info("kick_public_key_fetched")
        return envelope.data.public_key

    @staticmethod
    def _check(public_key: rsa.RSAPublicKey, message: bytes, signature: bytes) -> bool:
        try:
            public_key.verify(signature, message, padding.PKCS1v15(), hashes.SHA256())
        except InvalidSignature:
            return False
        return True
