"""Models used for API request and response payloads."""

from webapi_backend.api.models.auth import (
    AuthTokenResponse,
    IdentityResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserRegisterRequest,
    UserRegisterResponse,
    UserResponse,
)

__all__ = [
    "AuthTokenResponse",
    "IdentityResponse",
    "UserLoginRequest",
    "UserLoginResponse",
    "UserRegisterRequest",
    "UserRegisterResponse",
    "UserResponse",
]
