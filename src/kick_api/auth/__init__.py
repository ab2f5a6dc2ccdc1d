"""Credenciais, OAuth e checagem de permissões."""

from kick_api.auth.credentials import (
    AppCredential,
    Credential,
    UserCredential,
    is_delegated,
    refresh_credential,
)
from kick_api.auth.oauth import (
    AuthorizationRequest,
    KickOAuth,
    TokenGrant,
    TokenIntrospection,
)
from kick_api.auth.permissions import PermissionRequirement, check_permission, requires

__all__ = [
    "AppCredential",
    "AuthorizationRequest",
    "Credential",
    "KickOAuth",
    "PermissionRequirement",
    "TokenGrant",
    "TokenIntrospection",
    "UserCredential",
    "check_permission",
    "is_delegated",
    "refresh_credential",
    "requires",
]
