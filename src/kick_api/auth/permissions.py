"""Checagem local de permissão antes de qualquer chamada à API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kick_api.auth.credentials import UserCredential
from kick_api.errors import DelegationRequiredError, InsufficientScopeError

if TYPE_CHECKING:
    from kick_api.auth.credentials import Credential


@dataclass(frozen=True)
class PermissionRequirement:
    """Scopes exigidos por um call site e se ele exige credencial delegada."""

    scopes: frozenset[str] = frozenset()
    must_be_delegated: bool = False


def requires(*scopes: str, delegated: bool = False) -> PermissionRequirement:
    """Atalho: ``requires(Scope.CHAT_WRITE, delegated=True)``."""
    return PermissionRequirement(scopes=frozenset(scopes), must_be_delegated=delegated)


def check_permission(
    credential: Credential,
    requirement: PermissionRequirement | None,
) -> None:
    """Valida a credencial contra o requisito.

    Credenciais de aplicação nunca passam por checagem de scopes, apenas
    pela exigência de delegação.

    Raises:
        DelegationRequiredError: Requisito delegado com credencial de aplicação.
        InsufficientScopeError: Credencial delegada sem algum scope exigido.
    """
    if requirement is None:
        return

    if not isinstance(credential, UserCredential):
        if requirement.must_be_delegated:
            raise DelegationRequiredError(
                "Operação exige credencial delegada (user token)"
            )
        return

    if not requirement.scopes <= credential.scopes:
        raise InsufficientScopeError(required=requirement.scopes, held=credential.scopes)
