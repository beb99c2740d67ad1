"""Dependency providers for FastAPI routers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import cache
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from webapi_backend.api.authorization import Authorizer, Identity, RoleAuthorizer
from webapi_backend.api.services import AuthService, ValuesService
from webapi_backend.database import IdentityDataContext, get_identity_context

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)
_values_service = ValuesService()
_authorizer = RoleAuthorizer()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@cache
def get_auth_service() -> AuthService:
    """Return the shared :class:`AuthService` instance."""

    return AuthService()


def get_values_service() -> ValuesService:
    """Return the shared :class:`ValuesService` instance."""

    return _values_service


def get_authorizer() -> Authorizer:
    """Return the authorizer consulted by :func:`require_roles`."""

    return _authorizer


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    context: IdentityDataContext = Depends(get_identity_context),
    auth_service: AuthService = Depends(get_auth_service),
) -> Identity:
    """Resolve the authenticated identity from a bearer token."""

    if credentials is None:
        raise _unauthorized("Missing credentials")

    try:
        payload = auth_service.decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError as exc:
        raise _unauthorized("Invalid token") from exc

    try:
        user_id = UUID(payload.sub)
    except ValueError as exc:
        raise _unauthorized("Invalid token subject") from exc

    user = context.users.get_by_id(user_id)
    if user is None:
        raise _unauthorized("User not found")

    return Identity.from_user(user)


def require_roles(*roles: str) -> Callable[..., Identity]:
    """Build a dependency admitting identities that hold any of ``roles``.

    With no roles the dependency admits any authenticated identity.
    """

    required = frozenset(roles)

    def dependency(
        identity: Identity = Depends(get_current_identity),
        authorizer: Authorizer = Depends(get_authorizer),
    ) -> Identity:
        if not authorizer.authorize(identity, required):
            logger.warning(
                "Denied %s: requires one of %s", identity.username, sorted(required)
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient role"
            )
        return identity

    return dependency


__all__ = [
    "get_auth_service",
    "get_authorizer",
    "get_current_identity",
    "get_values_service",
    "require_roles",
]
