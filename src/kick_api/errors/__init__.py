"""Exceções do cliente Kick."""

from .exceptions import (
    BadRequestError,
    ContractViolationError,
    CredentialRefreshError,
    DelegationRequiredError,
    EmptyResponseError,
    ForbiddenError,
    InsufficientScopeError,
    InvalidEventError,
    InvalidRequestError,
    KickAPIError,
    KickConnectionError,
    KickError,
    NotFoundError,
    OAuthError,
    PermissionDeniedError,
    ServerError,
    TooManyRequestsError,
    UnauthenticatedEventError,
    UnauthorizedError,
    UnexpectedAPIError,
    UnexpectedResponseShapeError,
    error_for_status,
)

__all__ = [
    "BadRequestError",
    "ContractViolationError",
    "CredentialRefreshError",
    "DelegationRequiredError",
    "EmptyResponseError",
    "ForbiddenError",
    "InsufficientScopeError",
    "InvalidEventError",
    "InvalidRequestError",
    "KickAPIError",
    "KickConnectionError",
    "KickError",
    "NotFoundError",
    "OAuthError",
    "PermissionDeniedError",
    "ServerError",
    "TooManyRequestsError",
    "UnauthenticatedEventError",
    "UnauthorizedError",
    "UnexpectedAPIError",
    "UnexpectedResponseShapeError",
    "error_for_status",
]
