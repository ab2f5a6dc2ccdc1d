"""Cliente do servidor OAuth da Kick.

Cobre os grants usados pelo ciclo de vida das credenciais:
- client_credentials (credencial de aplicação)
- authorization_code com PKCE (credencial delegada inicial)
- refresh_token (renovação da credencial delegada)
- revogação e introspecção de tokens
"""

from __future__ import annotations

import base64
import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Literal

import httpx
from pydantic import BaseModel

from kick_api.config.settings import get_kick_settings
from kick_api.errors import CredentialRefreshError, OAuthError
from kick_api.http.wire import WireContract

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kick_api.config.settings import KickSettings

logger = logging.getLogger(__name__)

TokenType = Literal["app", "user"]


class _UserTokenResponse(BaseModel):
    access_token: str
    token_type: str
    refresh_token: str
    expires_in: int
    scope: str


class _AppTokenResponse(BaseModel):
    access_token: str
    token_type: str
    expires_in: int


class _ActiveIntrospection(BaseModel):
    active: Literal[True]
    client_id: str
    exp: int
    token_type: TokenType
    scope: str = ""


class _InactiveIntrospection(BaseModel):
    active: Literal[False]


class _IntrospectionEnvelope(BaseModel):
    data: _ActiveIntrospection | _InactiveIntrospection


_USER_TOKEN = WireContract[_UserTokenResponse](_UserTokenResponse)
_APP_TOKEN = WireContract[_AppTokenResponse](_AppTokenResponse)
_INTROSPECTION = WireContract[_IntrospectionEnvelope](_IntrospectionEnvelope)


@dataclass(frozen=True)
class TokenGrant:
    """Dados de token emitidos pelo servidor OAuth."""

    access_token: str
    expires_at: datetime
    token_type: str = "Bearer"
    refresh_token: str | None = None
    scopes: frozenset[str] = frozenset()


@dataclass(frozen=True)
class TokenIntrospection:
    """Resultado de introspecção. Campos além de ``active`` só quando ativo."""

    active: bool
    token_type: TokenType | None = None
    client_id: str | None = None
    expires_at: datetime | None = None
    scopes: frozenset[str] = frozenset()


@dataclass(frozen=True)
class AuthorizationRequest:
    """URL de autorização e segredos que o chamador guarda até o callback."""

    url: str
    state: str
    code_verifier: str


def parse_scopes(scope: str) -> frozenset[str]:
    """Converte o campo ``scope`` (separado por espaço) em conjunto."""
    return frozenset(scope.split())


def _expires_at(expires_in: int) -> datetime:
    return datetime.now(UTC) + timedelta(seconds=expires_in)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class KickOAuth:
    """Cliente do servidor OAuth (id.kick.com).

    Args:
        client_id: Client ID. Padrão: settings.
        client_secret: Client secret. Padrão: settings.
        redirect_uri: Redirect URI registrada. Padrão: settings.
        settings: KickSettings opcional. Se None, carrega do ambiente.
        http_client: httpx.AsyncClient injetável (testes, pooling).
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        *,
        settings: KickSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = settings or get_kick_settings()
        self._client_id = client_id if client_id is not None else settings.client_id
        self._client_secret = (
            client_secret if client_secret is not None else settings.client_secret
        )
        self._redirect_uri = redirect_uri if redirect_uri is not None else settings.redirect_uri
        self._base_url = settings.oauth_base_url.rstrip("/")
        self._introspect_url = settings.api_url("token/introspect")
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=settings.request_timeout_seconds
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    def authorization_url(self, scopes: Iterable[str]) -> AuthorizationRequest:
        """Monta a URL de autorização (authorization code + PKCE S256).

        Returns:
            AuthorizationRequest com a URL, o ``state`` e o ``code_verifier``
            que deve ser reapresentado em exchange_code().
        """
        state = secrets.token_hex(16)
        code_verifier = secrets.token_urlsafe(32)
        digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
        code_challenge = base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")

        params = {
            "client_id": self._client_id,
            "response_type": "code",
            "state": state,
            "scope": " ".join(scopes),
            "code_challenge": code_challenge,
            "code_challenge_method": "S256",
        }
        # Redirect para loopback exige o parâmetro extra
        if "127.0.0.1" in self._redirect_uri:
            params["redirect"] = "127.0.0.1"
        params["redirect_uri"] = self._redirect_uri

        url = httpx.URL(f"{self._base_url}/authorize", params=params)
        return AuthorizationRequest(url=str(url), state=state, code_verifier=code_verifier)

    async def exchange_code(self, code: str, code_verifier: str) -> TokenGrant:
        """Troca o authorization code por uma credencial delegada."""
        token = await self._request_token(
            {
                "code": code,
                "redirect_uri": self._redirect_uri,
                "grant_type": "authorization_code",
                "code_verifier": code_verifier,
            },
            _USER_TOKEN,
            OAuthError,
        )
        return TokenGrant(
            access_token=token.access_token,
            token_type=token.token_type,
            refresh_token=token.refresh_token,
            expires_at=_expires_at(token.expires_in),
            scopes=parse_scopes(token.scope),
        )

    async def get_app_access_token(self) -> TokenGrant:
        """Obtém credencial de aplicação (client_credentials)."""
        token = await self._request_token(
            {"grant_type": "client_credentials"},
            _APP_TOKEN,
            CredentialRefreshError,
        )
        return TokenGrant(
            access_token=token.access_token,
            token_type=token.token_type,
            expires_at=_expires_at(token.expires_in),
        )

    async def refresh_token(self, refresh_token: str) -> TokenGrant:
        """Renova a credencial delegada (grant refresh_token).

        Raises:
            CredentialRefreshError: Se o refresh_token for rejeitado.
        """
        token = await self._request_token(
            {"refresh_token": refresh_token, "grant_type": "refresh_token"},
            _USER_TOKEN,
            CredentialRefreshError,
        )
        return TokenGrant(
            access_token=token.access_token,
            token_type=token.token_type,
            refresh_token=token.refresh_token,
            expires_at=_expires_at(token.expires_in),
            scopes=parse_scopes(token.scope),
        )

    async def revoke_token(
        self,
        token: str,
        token_hint_type: Literal["access_token", "refresh_token"] | None = None,
    ) -> None:
        form = {"token": token}
        if token_hint_type:
            form["token_hint_type"] = token_hint_type
        response = await self._http_client.post(f"{self._base_url}/revoke", data=form)
        if not response.is_success:
            raise OAuthError(
                "Falha ao revogar token",
                status_code=response.status_code,
                response_body=_response_body(response),
            )

    async def introspect_token(self, token: str) -> TokenIntrospection:
        """Consulta estado, tipo e scopes de um access token.

        401 é tratado como token inativo, não como erro.
        """
        response = await self._http_client.post(
            self._introspect_url,
            headers={"Authorization": f"Bearer {token}"},
        )
        if response.status_code == 401:
            return TokenIntrospection(active=False)
        if not response.is_success:
            raise OAuthError(
                "Falha na introspecção do token",
                status_code=response.status_code,
                response_body=_response_body(response),
            )

        try:
            envelope = _INTROSPECTION.validate(response.json())
        except ValueError as exc:
            raise OAuthError("Resposta de introspecção inesperada") from exc

        data = envelope.data
        if not isinstance(data, _ActiveIntrospection):
            return TokenIntrospection(active=False)
        return TokenIntrospection(
            active=True,
            token_type=data.token_type,
            client_id=data.client_id,
            expires_at=datetime.fromtimestamp(data.exp, UTC),
            scopes=parse_scopes(data.scope) if data.token_type == "user" else frozenset(),
        )

    async def _request_token(
        self,
        form: dict[str, str],
        contract: WireContract[Any],
        error_cls: type[OAuthError],
    ) -> Any:
        grant_type = form["grant_type"]
        response = await self._http_client.post(
            f"{self._base_url}/token",
            data={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                **form,
            },
        )
        if not response.is_success:
            logger.warning(
                "kick_token_request_rejected",
                extra={"grant_type": grant_type, "status_code": response.status_code},
            )
            raise error_cls(
                f"Grant {grant_type} rejeitado pelo servidor OAuth",
                status_code=response.status_code,
                response_body=_response_body(response),
            )

        try:
            token = contract.validate(response.json())
        except ValueError as exc:
            raise error_cls(f"Resposta inesperada para grant {grant_type}") from exc

        logger.info("kick_token_issued", extra={"grant_type": grant_type})
        return token
