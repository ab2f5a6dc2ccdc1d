"""Testes para kick_api.auth.permissions."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from kick_api.auth.credentials import UserCredential
from kick_api.auth.permissions import PermissionRequirement, check_permission, requires
from kick_api.constants import Scope
from kick_api.errors import DelegationRequiredError, InsufficientScopeError


def _user(*scopes: str) -> UserCredential:
    return UserCredential(
        access_token="tok",
        expires_at=datetime.now(UTC),
        scopes=frozenset(scopes),
        refresh_token="ref",
    )


def test_requires_builds_requirement() -> None:
    requirement = requires(Scope.CHAT_WRITE, delegated=True)
    assert requirement == PermissionRequirement(
        scopes=frozenset({"chat:write"}), must_be_delegated=True
    )


def test_no_requirement_always_passes(app_credential) -> None:
    check_permission(app_credential, None)


def test_app_credential_rejected_when_delegation_required(app_credential) -> None:
    with pytest.raises(DelegationRequiredError):
        check_permission(app_credential, requires(delegated=True))


def test_app_credential_is_never_scope_checked(app_credential) -> None:
    """Scopes não se aplicam a credenciais de aplicação."""
    check_permission(app_credential, requires(Scope.CHANNEL_READ))


def test_user_credential_with_all_scopes_passes() -> None:
    check_permission(
        _user("user:read", "channel:write"),
        requires(Scope.USER_READ, Scope.CHANNEL_WRITE, delegated=True),
    )


def test_missing_scope_lists_missing_and_held() -> None:
    with pytest.raises(InsufficientScopeError) as exc_info:
        check_permission(_user("user:read"), requires(Scope.USER_READ, Scope.CHANNEL_WRITE))

    error = exc_info.value
    assert error.missing == frozenset({"channel:write"})
    assert error.held == frozenset({"user:read"})
    assert "channel:write" in str(error)
    assert "user:read" in str(error)
