"""Authentication domain logic."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Tuple
from uuid import uuid4

import jwt

from webapi_backend.database import IdentityDataContext, UserSchema
from webapi_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


class UserAlreadyExistsError(Exception):
    """Raised when attempting to create a duplicate user."""


class InvalidCredentialsError(Exception):
    """Raised when supplied credentials are invalid."""


class UserNotFoundError(Exception):
    """Raised when an operation targets a user that does not exist."""


@dataclass(slots=True)
class TokenPayload:
    """Represents encoded token metadata.

    ``roles`` is informational for clients; authorization reads roles from
    the identity store on every request.
    """

    sub: str
    exp: datetime
    roles: list[str] = field(default_factory=list)


class AuthService:
    """Handles password hashing, token generation and role grants."""

    def __init__(
        self,
        *,
        secret_key: str | None = None,
        algorithm: str | None = None,
        access_token_ttl_minutes: int | None = None,
        default_roles: Sequence[str] | None = None,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._secret_key = secret_key or config.auth_secret_key
        self._algorithm = algorithm or config.auth_algorithm
        if access_token_ttl_minutes is None:
            access_token_ttl_minutes = config.auth_access_token_ttl_minutes
        self._access_token_ttl = timedelta(minutes=access_token_ttl_minutes)
        self._default_roles = tuple(
            config.auth_default_roles if default_roles is None else default_roles
        )

    def hash_password(self, password: str) -> str:
        """Hash a password using PBKDF2 with a random salt."""

        salt = secrets.token_bytes(16)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS
        )
        return f"{base64.b64encode(salt).decode()}:{base64.b64encode(digest).decode()}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Validate a password against a stored PBKDF2 hash."""

        try:
            salt_b64, hash_b64 = password_hash.split(":", 1)
        except ValueError:
            return False
        salt = base64.b64decode(salt_b64.encode())
        expected = base64.b64decode(hash_b64.encode())
        actual = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS
        )
        return hmac.compare_digest(actual, expected)

    def create_access_token(self, subject: str, roles: Iterable[str] = ()) -> str:
        expires_at = datetime.now(tz=timezone.utc) + self._access_token_ttl
        payload = {"sub": subject, "exp": expires_at, "roles": sorted(roles)}
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> TokenPayload:
        """Decode and verify a bearer token.

        Raises :class:`jwt.InvalidTokenError` (or a subclass) on a bad
        signature, an expired token or a missing ``sub`` claim.
        """

        data = jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._algorithm],
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(
            sub=data["sub"],
            exp=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
            roles=list(data.get("roles", [])),
        )

    def issue_token(self, user: UserSchema) -> str:
        return self.create_access_token(str(user.id), user.effective_roles())

    def register_user(
        self,
        *,
        context: IdentityDataContext,
        username: str,
        password: str,
        email: str | None = None,
    ) -> Tuple[UserSchema, str]:
        if context.users.get_by_username(username) is not None:
            raise UserAlreadyExistsError(username)

        user = UserSchema(
            id=uuid4(),
            username=username,
            email=email,
            password_hash=self.hash_password(password),
        )
        for role_name in self._default_roles:
            user.roles.append(context.roles.get_or_create(role_name))
        user = context.users.add(user)
        logger.info("Registered user %s with roles %s", username, list(self._default_roles))
        return user, self.issue_token(user)

    def authenticate_user(
        self, *, context: IdentityDataContext, username: str, password: str
    ) -> Tuple[UserSchema, str]:
        user = context.users.get_by_username(username)
        if user is None or not self.verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for %s", username)
            raise InvalidCredentialsError(username)
        return user, self.issue_token(user)

    def grant_role(
        self, *, context: IdentityDataContext, username: str, role_name: str
    ) -> UserSchema:
        """Make ``username`` a member of ``role_name``; no-op if already granted."""

        user = context.users.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        if all(role.name != role_name for role in user.roles):
            user.roles.append(context.roles.get_or_create(role_name))
            logger.info("Granted role %s to %s", role_name, username)
        return user
