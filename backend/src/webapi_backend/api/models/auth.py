"""Pydantic models for authentication endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


USERNAME_PATTERN = r"^[A-Za-z0-9_.-]{3,64}$"
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 64
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _check_password_strength(value: str) -> str:
    if not any(char.isalpha() for char in value):
        msg = "password must contain at least one letter"
        raise ValueError(msg)
    if not any(char.isdigit() for char in value):
        msg = "password must contain at least one digit"
        raise ValueError(msg)
    return value


class UserResponse(BaseModel):
    """Public representation of a registered user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    username: str
    email: str | None = None
    roles: list[str] = Field(default_factory=list)
    created_at: datetime | None = None

    @field_validator("roles", mode="before")
    @classmethod
    def role_names(cls, value: object) -> object:
        if isinstance(value, (list, tuple, set, frozenset)):
            return sorted(getattr(item, "name", item) for item in value)
        return value


class AuthTokenResponse(BaseModel):
    """Bearer token payload returned by the API."""

    access_token: str
    token_type: str = "bearer"


class UserRegisterRequest(BaseModel):
    """Payload for creating a new user."""

    username: str = Field(pattern=USERNAME_PATTERN)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN, max_length=255)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)


class UserRegisterResponse(BaseModel):
    """Response returned after a successful registration."""

    user: UserResponse
    token: AuthTokenResponse


class UserLoginRequest(BaseModel):
    """Payload for authenticating an existing user."""

    username: str = Field(pattern=USERNAME_PATTERN)
    password: str = Field(max_length=PASSWORD_MAX_LENGTH)


class UserLoginResponse(BaseModel):
    """Response returned after a successful authentication."""

    user: UserResponse
    token: AuthTokenResponse


class IdentityResponse(BaseModel):
    """The caller as resolved from its bearer token."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    user_id: UUID
    username: str
    roles: list[str]

    @field_validator("roles", mode="before")
    @classmethod
    def sorted_roles(cls, value: object) -> object:
        if isinstance(value, (set, frozenset)):
            return sorted(value)
        return value
