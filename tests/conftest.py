"""Configuração do pytest para o projeto kick-api."""

from __future__ import annotations

import asyncio
import base64
import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cryptography.hazmat.primitives import hashes, serialization  # noqa: E402
from cryptography.hazmat.primitives.asymmetric import padding, rsa  # noqa: E402

from kick_api.auth.credentials import AppCredential, UserCredential  # noqa: E402
from kick_api.auth.oauth import TokenGrant  # noqa: E402
from kick_api.config.settings import KickSettings  # noqa: E402
from kick_api.errors import CredentialRefreshError  # noqa: E402

ALL_SCOPES = frozenset(
    {
        "user:read",
        "channel:read",
        "channel:write",
        "channel:rewards:write",
        "chat:write",
        "events:subscribe",
        "kicks:read",
        "moderation:ban",
        "moderation:chat_message:manage",
    }
)


class FakeOAuth:
    """KickOAuth falso: conta grants e emite tokens sequenciais."""

    def __init__(self, *, fail: bool = False, scopes: frozenset[str] = ALL_SCOPES) -> None:
        self.fail = fail
        self.scopes = scopes
        self.refresh_calls: list[str] = []
        self.app_token_calls = 0

    async def refresh_token(self, refresh_token: str) -> TokenGrant:
        self.refresh_calls.append(refresh_token)
        await asyncio.sleep(0)
        if self.fail:
            raise CredentialRefreshError("Grant refresh_token rejeitado", status_code=400)
        n = len(self.refresh_calls)
        return TokenGrant(
            access_token=f"user-token-{n}",
            expires_at=datetime.now(UTC) + timedelta(hours=1),
            refresh_token=f"refresh-{n}",
            scopes=self.scopes,
        )

    async def get_app_access_token(self) -> TokenGrant:
        self.app_token_calls += 1
        await asyncio.sleep(0)
        if self.fail:
            raise CredentialRefreshError("Grant client_credentials rejeitado", status_code=401)
        return TokenGrant(
            access_token=f"app-token-{self.app_token_calls}",
            expires_at=datetime.now(UTC) + timedelta(hours=1),
        )


class ResponseQueue:
    """Handler de httpx.MockTransport: devolve respostas em ordem e grava requests."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Request inesperado: {request.method} {request.url}")
        return self.responses.pop(0)


@pytest.fixture
def settings() -> KickSettings:
    return KickSettings(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://127.0.0.1:3000/callback",
        api_base_url="https://api.kick.test/public/v1",
        oauth_base_url="https://id.kick.test/oauth",
        rate_limit_backoff_seconds=0.0,
        rate_limit_backoff_max_seconds=0.0,
    )


@pytest.fixture
def fake_oauth() -> FakeOAuth:
    return FakeOAuth()


@pytest.fixture
def user_credential() -> UserCredential:
    return UserCredential(
        access_token="user-token-0",
        expires_at=datetime.now(UTC) + timedelta(hours=1),
        scopes=ALL_SCOPES,
        refresh_token="refresh-0",
    )


@pytest.fixture
def app_credential() -> AppCredential:
    return AppCredential(
        access_token="app-token-0",
        expires_at=datetime.now(UTC) + timedelta(hours=1),
    )


@pytest.fixture
def mock_http():
    """Factory: (respostas...) -> (httpx.AsyncClient, ResponseQueue)."""

    def _make(*responses: httpx.Response) -> tuple[httpx.AsyncClient, ResponseQueue]:
        queue = ResponseQueue(*responses)
        return httpx.AsyncClient(transport=httpx.MockTransport(queue)), queue

    return _make


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(rsa_private_key: rsa.RSAPrivateKey) -> str:
    return (
        rsa_private_key.public_key()
        .public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("ascii")
    )


@pytest.fixture
def sign():
    """Factory: assina ``<id>.<timestamp>.<corpo>`` como a Kick (base64)."""

    def _sign(
        private_key: rsa.RSAPrivateKey, message_id: str, timestamp: str, body: bytes
    ) -> str:
        message = f"{message_id}.{timestamp}.".encode() + body
        signature = private_key.sign(message, padding.PKCS1v15(), hashes.SHA256())
        return base64.b64encode(signature).decode("ascii")

    return _sign
