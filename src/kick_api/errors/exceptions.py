"""Exceções do cliente Kick.

Hierarquia:
- KickAPIError e subclasses: falhas de chamada à API (com diagnóstico)
- PermissionDeniedError: checagem local de permissão (nenhuma chamada feita)
- OAuthError: falhas no endpoint de token
- UnauthenticatedEventError / InvalidEventError: lado do webhook
"""

from __future__ import annotations

from typing import Any


class KickError(Exception):
    """Base para todos os erros do cliente Kick."""


class KickAPIError(KickError):
    """Erro de chamada à API com contexto de diagnóstico.

    Args:
        message: Descrição curta do erro.
        endpoint: Path chamado (relativo à origem versionada).
        method: Método HTTP.
        request_body: Corpo enviado (já no formato wire), se houver.
        response_body: Corpo decodificado da resposta, se houver.
        status_code: Status HTTP, quando a chamada chegou à rede.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        method: str | None = None,
        request_body: Any = None,
        response_body: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.method = method
        self.request_body = request_body
        self.response_body = response_body
        self.status_code = status_code

    @property
    def details(self) -> dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "method": self.method,
            "request_body": self.request_body,
            "response_body": self.response_body,
            "status_code": self.status_code,
        }


class BadRequestError(KickAPIError):
    """400: chamada malformada."""


class UnauthorizedError(KickAPIError):
    """401 mesmo após um refresh da credencial."""


class ForbiddenError(KickAPIError):
    """403: autenticado mas sem permissão."""


class NotFoundError(KickAPIError):
    """404."""


class TooManyRequestsError(KickAPIError):
    """429 mesmo após uma nova tentativa."""


class ServerError(KickAPIError):
    """500."""


class UnexpectedAPIError(KickAPIError):
    """Status não mapeado."""


class KickConnectionError(KickAPIError):
    """Falha de transporte (conexão, timeout); a chamada não teve resposta."""


class EmptyResponseError(KickAPIError):
    """Sucesso sem corpo quando o chamador esperava dados."""


class ContractViolationError(KickAPIError):
    """Base para violações de contrato de fronteira."""

    def __init__(
        self,
        message: str,
        *,
        validation_errors: list[dict[str, Any]] | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message, **context)
        self.validation_errors = validation_errors or []


class InvalidRequestError(ContractViolationError):
    """Corpo de requisição não satisfaz o contrato; nada foi enviado."""


class UnexpectedResponseShapeError(ContractViolationError):
    """Resposta da API não satisfaz o contrato esperado."""


class PermissionDeniedError(KickError):
    """Base para falhas da checagem local de permissão."""


class DelegationRequiredError(PermissionDeniedError):
    """Operação exige credencial delegada (user token)."""


class InsufficientScopeError(PermissionDeniedError):
    """Credencial delegada sem todos os scopes exigidos."""

    def __init__(
        self,
        required: frozenset[str],
        held: frozenset[str],
    ) -> None:
        self.required = frozenset(required)
        self.held = frozenset(held)
        self.missing = self.required - self.held
        super().__init__(
            f"Scopes ausentes: {', '.join(sorted(self.missing))} "
            f"(possui: {', '.join(sorted(self.held)) or '-'})"
        )


class OAuthError(KickError):
    """Endpoint de token OAuth rejeitou a requisição."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class CredentialRefreshError(OAuthError):
    """Refresh da credencial rejeitado (ex.: refresh_token revogado)."""


class UnauthenticatedEventError(KickError):
    """Evento de webhook sem assinatura válida."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidEventError(KickError):
    """Evento autenticado mas malformado (JSON, tipo ou contrato)."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


_STATUS_ERRORS: dict[int, type[KickAPIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: TooManyRequestsError,
    500: ServerError,
}


def error_for_status(status_code: int) -> type[KickAPIError]:
    """Retorna a classe de erro correspondente ao status HTTP."""
    return _STATUS_ERRORS.get(status_code, UnexpectedAPIError)
