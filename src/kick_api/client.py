"""Fachada do cliente Kick: pipeline + todos os grupos de endpoints.

Uso:
    oauth = KickOAuth()
    async with await KickClient.from_access_token(oauth, token, refresh) as kick:
        channel = await kick.channels.get_authenticated_channel()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kick_api.auth.credentials import AppCredential, UserCredential
from kick_api.endpoints import (
    CategoriesAPI,
    ChannelRewardsAPI,
    ChannelsAPI,
    ChatAPI,
    EventsAPI,
    KicksAPI,
    LivestreamsAPI,
    ModerationAPI,
    UsersAPI,
)
from kick_api.errors import CredentialRefreshError
from kick_api.http.pipeline import KickAPIClient

if TYPE_CHECKING:
    import httpx

    from kick_api.auth.credentials import Credential, RefreshCallback
    from kick_api.auth.oauth import KickOAuth
    from kick_api.config.settings import KickSettings

logger = logging.getLogger(__name__)


class KickClient:
    """Cliente da API pública da Kick para uma credencial.

    Args:
        credential: AppCredential ou UserCredential.
        oauth: Cliente OAuth usado nos refreshes.
        settings: KickSettings opcional. Se None, carrega do ambiente.
        http_client: httpx.AsyncClient injetável.
        on_credential_refresh: Callback (sync ou async) chamado após cada
            refresh, para o chamador persistir a credencial.
    """

    def __init__(
        self,
        credential: Credential,
        oauth: KickOAuth,
        *,
        settings: KickSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
        on_credential_refresh: RefreshCallback | None = None,
    ) -> None:
        self.api = KickAPIClient(
            credential,
            oauth,
            settings=settings,
            http_client=http_client,
            on_credential_refresh=on_credential_refresh,
        )
        self.categories = CategoriesAPI(self.api)
        self.channels = ChannelsAPI(self.api)
        self.channel_rewards = ChannelRewardsAPI(self.api)
        self.chat = ChatAPI(self.api)
        self.events = EventsAPI(self.api)
        self.kicks = KicksAPI(self.api)
        self.livestreams = LivestreamsAPI(self.api)
        self.moderation = ModerationAPI(self.api)
        self.users = UsersAPI(self.api)

    @property
    def credential(self) -> Credential:
        return self.api.credential

    @property
    def is_delegated(self) -> bool:
        return self.api.is_delegated

    @classmethod
    async def from_access_token(
        cls,
        oauth: KickOAuth,
        access_token: str,
        refresh_token: str | None = None,
        **kwargs: Any,
    ) -> KickClient:
        """Cria o cliente a partir de um token existente, via introspecção.

        - Token inativo + refresh_token: renova e usa credencial delegada
        - Token inativo sem refresh_token: CredentialRefreshError
        - Token de aplicação ativo: AppCredential
        - Token de usuário ativo: UserCredential (exige refresh_token)

        Raises:
            CredentialRefreshError: Token inativo e sem como renovar.
            ValueError: Token de usuário ativo sem refresh_token.
        """
        info = await oauth.introspect_token(access_token)

        if not info.active:
            if not refresh_token:
                raise CredentialRefreshError(
                    "access_token expirado ou inválido e nenhum refresh_token informado"
                )
            logger.info("kick_access_token_inactive_refreshing")
            grant = await oauth.refresh_token(refresh_token)
            credential: Credential = UserCredential(
                access_token=grant.access_token,
                expires_at=grant.expires_at,
                scopes=grant.scopes,
                refresh_token=grant.refresh_token or refresh_token,
            )
        elif info.token_type == "app":
            credential = AppCredential(access_token=access_token, expires_at=info.expires_at)
        else:
            credential = UserCredential(
                access_token=access_token,
                expires_at=info.expires_at,
                scopes=info.scopes,
                refresh_token=refresh_token or "",
            )

        return cls(credential, oauth, **kwargs)

    @classmethod
    async def from_client_credentials(cls, oauth: KickOAuth, **kwargs: Any) -> KickClient:
        """Cria o cliente com uma credencial de aplicação nova."""
        grant = await oauth.get_app_access_token()
        credential = AppCredential(access_token=grant.access_token, expires_at=grant.expires_at)
        return cls(credential, oauth, **kwargs)

    async def aclose(self) -> None:
        await self.api.aclose()

    async def __aenter__(self) -> KickClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
