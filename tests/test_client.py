"""Testes para a fachada KickClient."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import httpx
import pytest

from kick_api.auth.credentials import AppCredential, UserCredential
from kick_api.auth.oauth import TokenIntrospection
from kick_api.client import KickClient
from kick_api.errors import CredentialRefreshError


@pytest.fixture
def introspecting_oauth(fake_oauth):
    """FakeOAuth com resultado de introspecção configurável."""
    fake_oauth.introspection = TokenIntrospection(active=False)
    fake_oauth.introspected = []

    async def introspect_token(token: str) -> TokenIntrospection:
        fake_oauth.introspected.append(token)
        return fake_oauth.introspection

    fake_oauth.introspect_token = introspect_token
    return fake_oauth


def _active(token_type: str, scopes: frozenset[str] = frozenset()) -> TokenIntrospection:
    return TokenIntrospection(
        active=True,
        token_type=token_type,  # type: ignore[arg-type]
        client_id="client-id",
        expires_at=datetime.now(UTC) + timedelta(minutes=30),
        scopes=scopes,
    )


class TestFromAccessToken:
    """Testes para KickClient.from_access_token."""

    @pytest.mark.asyncio
    async def test_active_app_token(self, introspecting_oauth, settings) -> None:
        introspecting_oauth.introspection = _active("app")

        kick = await KickClient.from_access_token(
            introspecting_oauth, "app-tok", settings=settings, http_client=httpx.AsyncClient()
        )

        assert isinstance(kick.credential, AppCredential)
        assert kick.credential.access_token == "app-tok"
        assert kick.is_delegated is False

    @pytest.mark.asyncio
    async def test_active_user_token(self, introspecting_oauth, settings) -> None:
        introspecting_oauth.introspection = _active("user", frozenset({"chat:write"}))

        kick = await KickClient.from_access_token(
            introspecting_oauth,
            "user-tok",
            "ref",
            settings=settings,
            http_client=httpx.AsyncClient(),
        )

        assert isinstance(kick.credential, UserCredential)
        assert kick.credential.scopes == frozenset({"chat:write"})
        assert kick.credential.refresh_token == "ref"
        assert introspecting_oauth.refresh_calls == []

    @pytest.mark.asyncio
    async def test_active_user_token_without_refresh_token_fails(
        self, introspecting_oauth, settings
    ) -> None:
        introspecting_oauth.introspection = _active("user")

        with pytest.raises(ValueError):
            await KickClient.from_access_token(introspecting_oauth, "user-tok", settings=settings)

    @pytest.mark.asyncio
    async def test_inactive_token_is_refreshed(self, introspecting_oauth, settings) -> None:
        kick = await KickClient.from_access_token(
            introspecting_oauth,
            "expired",
            "refresh-0",
            settings=settings,
            http_client=httpx.AsyncClient(),
        )

        assert introspecting_oauth.refresh_calls == ["refresh-0"]
        assert kick.credential.access_token == "user-token-1"
        assert kick.is_delegated is True

    @pytest.mark.asyncio
    async def test_inactive_token_without_refresh_token_fails(
        self, introspecting_oauth, settings
    ) -> None:
        with pytest.raises(CredentialRefreshError):
            await KickClient.from_access_token(introspecting_oauth, "expired", settings=settings)


@pytest.mark.asyncio
async def test_from_client_credentials(fake_oauth, settings) -> None:
    kick = await KickClient.from_client_credentials(
        fake_oauth, settings=settings, http_client=httpx.AsyncClient()
    )

    assert fake_oauth.app_token_calls == 1
    assert isinstance(kick.credential, AppCredential)
    assert kick.credential.access_token == "app-token-1"


@pytest.mark.asyncio
async def test_groups_share_one_pipeline(app_credential, fake_oauth, settings) -> None:
    async with KickClient(
        app_credential, fake_oauth, settings=settings, http_client=httpx.AsyncClient()
    ) as kick:
        assert kick.channels._api is kick.api
        assert kick.moderation._api is kick.api
        assert kick.credential is app_credential
