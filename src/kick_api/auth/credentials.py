"""Credenciais bearer da Kick.

Duas variantes:
- AppCredential: token da própria aplicação (client_credentials), sem scopes
- UserCredential: token delegado por um usuário, com scopes e refresh_token

O refresh altera a credencial no próprio objeto, para que todos os
detentores (clientes, formatters de eventos) vejam o token novo.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from kick_api.auth.oauth import TokenGrant

if TYPE_CHECKING:
    from datetime import datetime

    from kick_api.auth.oauth import KickOAuth

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class AppCredential:
    """Credencial de aplicação (sem scopes, sem refresh_token)."""

    access_token: str
    expires_at: datetime
    _refresh_lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)


@dataclass(eq=False)
class UserCredential:
    """Credencial delegada por um usuário.

    Raises:
        ValueError: Se construída sem refresh_token.
    """

    access_token: str
    expires_at: datetime
    scopes: frozenset[str]
    refresh_token: str
    _refresh_lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.refresh_token:
            raise ValueError("UserCredential exige refresh_token")
        self.scopes = frozenset(self.scopes)


Credential: TypeAlias = AppCredential | UserCredential

RefreshCallback: TypeAlias = Callable[[Credential], Any]


def is_delegated(credential: Credential) -> bool:
    return isinstance(credential, UserCredential)


def snapshot(credential: Credential) -> TokenGrant:
    """Dados de token atuais da credencial."""
    if isinstance(credential, UserCredential):
        return TokenGrant(
            access_token=credential.access_token,
            expires_at=credential.expires_at,
            refresh_token=credential.refresh_token,
            scopes=credential.scopes,
        )
    return TokenGrant(access_token=credential.access_token, expires_at=credential.expires_at)


async def refresh_credential(
    credential: Credential,
    oauth: KickOAuth,
    *,
    stale_token: str | None = None,
    on_refresh: RefreshCallback | None = None,
) -> TokenGrant:
    """Renova a credencial com o grant da sua variante.

    Refreshes da mesma credencial são serializados. Se ``stale_token`` for
    informado e a credencial já não o carregar, outro chamador renovou
    enquanto este esperava: devolve o token atual sem novo grant.

    Args:
        credential: Credencial a renovar (alterada no próprio objeto).
        oauth: Cliente OAuth que emite o grant.
        stale_token: Token que o chamador viu ser rejeitado.
        on_refresh: Callback (sync ou async) chamado após a troca, para
            persistência pelo chamador. Exceções do callback são
            registradas em log e não propagam.

    Returns:
        Dados do token vigente após o refresh.

    Raises:
        CredentialRefreshError: Se o servidor OAuth rejeitar o grant.
    """
    async with credential._refresh_lock:
        if stale_token is not None and credential.access_token != stale_token:
            logger.debug("kick_credential_refresh_coalesced")
            return snapshot(credential)

        if isinstance(credential, UserCredential):
            grant = await oauth.refresh_token(credential.refresh_token)
            # Troca os quatro campos juntos, sem await no meio
            credential.access_token = grant.access_token
            credential.expires_at = grant.expires_at
            credential.scopes = grant.scopes
            credential.refresh_token = grant.refresh_token or credential.refresh_token
        else:
            grant = await oauth.get_app_access_token()
            credential.access_token = grant.access_token
            credential.expires_at = grant.expires_at

        logger.info(
            "kick_credential_refreshed",
            extra={
                "delegated": is_delegated(credential),
                "expires_at": credential.expires_at.isoformat(),
            },
        )

        if on_refresh is not None:
            try:
                result = on_refresh(credential)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                # Credencial já trocada: falha de persistência não aborta a chamada
                logger.exception("kick_credential_refresh_callback_failed")

        return snapshot(credential)
