"""Pipeline de requisições autenticadas à API pública da Kick.

Fluxo de uma chamada:
1. Checagem local de permissão (nenhuma chamada se falhar)
2. Validação do corpo e conversão camelCase -> snake_case
3. Envio com ``Authorization: Bearer <token>``
4. Classificação do status, com no máximo UMA nova tentativa:
   - 401: renova a credencial e repete a mesma chamada
   - 429: espera o backoff e repete a mesma chamada
5. Desembrulha ``data``, valida e converte snake_case -> camelCase
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Literal

import httpx
from pydantic import ValidationError

from kick_api.auth.credentials import is_delegated, refresh_credential
from kick_api.auth.permissions import check_permission
from kick_api.config.settings import get_kick_settings
from kick_api.errors import (
    EmptyResponseError,
    InvalidRequestError,
    KickAPIError,
    KickConnectionError,
    UnexpectedResponseShapeError,
    error_for_status,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from kick_api.auth.credentials import Credential, RefreshCallback
    from kick_api.auth.oauth import KickOAuth
    from kick_api.auth.permissions import PermissionRequirement
    from kick_api.config.settings import KickSettings
    from kick_api.http.wire import WireContract

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PATCH", "PUT", "DELETE"]

# Primeira tentativa + uma nova tentativa para 401/429
MAX_ATTEMPTS = 2

_RETRYABLE_STATUSES = frozenset({401, 429})


class KickAPIClient:
    """Executa chamadas autenticadas compartilhando uma credencial.

    Args:
        credential: Credencial ativa (alterada no próprio objeto em refresh).
        oauth: Cliente OAuth usado para renovar a credencial.
        settings: KickSettings opcional. Se None, carrega do ambiente.
        http_client: httpx.AsyncClient injetável.
        on_credential_refresh: Callback chamado após cada refresh.
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
        self._credential = credential
        self._oauth = oauth
        self._settings = settings or get_kick_settings()
        self._on_credential_refresh = on_credential_refresh
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=self._settings.request_timeout_seconds
        )

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def is_delegated(self) -> bool:
        return is_delegated(self._credential)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> KickAPIClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def execute(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        request_contract: WireContract[Any] | None = None,
        response_contract: WireContract[Any] | None = None,
        requirement: PermissionRequirement | None = None,
    ) -> Any:
        """Executa uma chamada autenticada.

        Args:
            endpoint: Path relativo à origem versionada (ex: "channels").
            method: Método HTTP.
            body: Corpo de domínio (camelCase). Enviado como JSON.
            params: Query string; valores lista viram chaves repetidas.
            request_contract: Contrato do corpo; converte para wire.
            response_contract: Contrato de ``data`` na resposta. Sem ele a
                chamada retorna None.
            requirement: Permissão exigida pelo call site.

        Returns:
            Valor de domínio (camelCase) ou None.

        Raises:
            PermissionDeniedError: Requisito não atendido (nada enviado).
            InvalidRequestError: Corpo viola o contrato (nada enviado).
            KickAPIError: Falha HTTP classificada, com diagnóstico.
            KickConnectionError: Falha de transporte; sem nova tentativa.
        """
        check_permission(self._credential, requirement)
        wire_body = self._prepare_body(endpoint, method, body, request_contract)
        query = _clean_params(params)

        for attempt in range(MAX_ATTEMPTS):
            token = self._credential.access_token
            response = await self._send(endpoint, method, wire_body, query, token)
            status_code = response.status_code

            if status_code in _RETRYABLE_STATUSES and attempt == 0:
                if status_code == 401:
                    logger.info(
                        "kick_credential_expired",
                        extra={"endpoint": endpoint, "method": method},
                    )
                    await refresh_credential(
                        self._credential,
                        self._oauth,
                        stale_token=token,
                        on_refresh=self._on_credential_refresh,
                    )
                else:
                    delay = self._rate_limit_delay(response)
                    logger.warning(
                        "kick_rate_limited",
                        extra={
                            "endpoint": endpoint,
                            "method": method,
                            "retry_in_seconds": delay,
                        },
                    )
                    await asyncio.sleep(delay)
                continue

            return self._handle_response(
                response, endpoint, method, wire_body, response_contract
            )

        raise KickAPIError("kick_retry_exhausted", endpoint=endpoint, method=method)

    def _prepare_body(
        self,
        endpoint: str,
        method: str,
        body: Any,
        request_contract: WireContract[Any] | None,
    ) -> Any:
        if body is None or request_contract is None:
            return body
        try:
            return request_contract.to_wire(body)
        except ValidationError as exc:
            raise InvalidRequestError(
                f"Corpo inválido para {method} {endpoint}",
                validation_errors=exc.errors(include_url=False),
                endpoint=endpoint,
                method=method,
                request_body=body,
            ) from exc

    async def _send(
        self,
        endpoint: str,
        method: str,
        wire_body: Any,
        params: dict[str, Any] | None,
        token: str,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"}
        if wire_body is not None:
            headers["Content-Type"] = "application/json"
        try:
            return await self._http_client.request(
                method,
                self._settings.api_url(endpoint),
                headers=headers,
                params=params,
                json=wire_body,
            )
        except httpx.TransportError as exc:
            logger.warning(
                "kick_connection_error",
                extra={
                    "endpoint": endpoint,
                    "method": method,
                    "error_type": type(exc).__name__,
                },
            )
            raise KickConnectionError(
                "kick_connection_error",
                endpoint=endpoint,
                method=method,
                request_body=wire_body,
            ) from exc

    def _rate_limit_delay(self, response: httpx.Response) -> float:
        delay = self._settings.rate_limit_backoff_seconds
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                delay = float(retry_after)
            except ValueError:
                pass  # formato HTTP-date: mantém o backoff padrão
        return max(0.0, min(delay, self._settings.rate_limit_backoff_max_seconds))

    def _handle_response(
        self,
        response: httpx.Response,
        endpoint: str,
        method: str,
        wire_body: Any,
        response_contract: WireContract[Any] | None,
    ) -> Any:
        status_code = response.status_code
        response_body = _decode_body(response)
        context = {
            "endpoint": endpoint,
            "method": method,
            "request_body": wire_body,
            "response_body": response_body,
            "status_code": status_code,
        }

        if not response.is_success:
            error_cls = error_for_status(status_code)
            logger.warning(
                "kick_request_failed",
                extra={
                    "endpoint": endpoint,
                    "method": method,
                    "status_code": status_code,
                    "error_type": error_cls.__name__,
                },
            )
            raise error_cls(f"{method} {endpoint} retornou {status_code}", **context)

        logger.debug(
            "kick_request_completed",
            extra={"endpoint": endpoint, "method": method, "status_code": status_code},
        )

        if response_body is None:
            if response_contract is not None:
                raise EmptyResponseError(
                    f"{method} {endpoint} não retornou dados", **context
                )
            return None

        if response_contract is None:
            return None

        if not isinstance(response_body, dict) or "data" not in response_body:
            raise UnexpectedResponseShapeError(
                "Resposta sem envelope 'data'", **context
            )

        try:
            return response_contract.to_domain(response_body["data"])
        except ValidationError as exc:
            raise UnexpectedResponseShapeError(
                f"Formato inesperado na resposta de {method} {endpoint}",
                validation_errors=exc.errors(include_url=False),
                **context,
            ) from exc


def _decode_body(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    query: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            query[key] = [str(item) for item in value]
        else:
            query[key] = str(value).lower() if isinstance(value, bool) else str(value)
    return query or None
