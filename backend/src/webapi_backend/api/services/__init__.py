"""Service layer for API-specific business logic."""

from webapi_backend.api.services.auth import (
    AuthService,
    InvalidCredentialsError,
    TokenPayload,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from webapi_backend.api.services.values import (
    ADMIN_VALUE,
    VALUES,
    ValueNotFoundError,
    ValuesService,
)

__all__ = [
    "ADMIN_VALUE",
    "AuthService",
    "InvalidCredentialsError",
    "TokenPayload",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "VALUES",
    "ValueNotFoundError",
    "ValuesService",
]
