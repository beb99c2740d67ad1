"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import Any
from uuid import UUID, uuid4

import pytest

# Settings are read while the API modules import; pin the secret first.
os.environ.setdefault("AUTH_SECRET_KEY", "test-secret-key")

from fastapi.testclient import TestClient  # noqa: E402

from webapi_backend.api import create_api  # noqa: E402
from webapi_backend.api.dependencies import get_auth_service  # noqa: E402
from webapi_backend.database import (  # noqa: E402
    RoleSchema,
    UserClaimSchema,
    UserSchema,
    get_identity_context,
)
from webapi_backend.settings import get_settings  # noqa: E402

TEST_PASSWORD = "Password123"  # noqa: S105


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("AUTH_SECRET_KEY", "test-secret-key")
    get_settings.cache_clear()
    get_auth_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_auth_service.cache_clear()


class FakeUserRepository:
    """In-memory repository used to mock database operations."""

    _store: dict[UUID, UserSchema] = {}  # noqa: RUF012

    def __init__(self, session: Any) -> None:
        self._session = session

    @classmethod
    def reset(cls) -> None:
        cls._store = {}

    def get_by_id(self, user_id: UUID) -> UserSchema | None:
        return type(self)._store.get(user_id)

    def get_by_username(self, username: str) -> UserSchema | None:
        return next(
            (user for user in type(self)._store.values() if user.username == username),
            None,
        )

    def add(self, user: UserSchema) -> UserSchema:
        if user.id is None:
            user.id = uuid4()
        type(self)._store[user.id] = user
        return user


class FakeRoleRepository:
    """In-memory stand-in for :class:`RoleRepository`."""

    _store: dict[str, RoleSchema] = {}  # noqa: RUF012

    def __init__(self, session: Any) -> None:
        self._session = session

    @classmethod
    def reset(cls) -> None:
        cls._store = {}

    def get_by_name(self, name: str) -> RoleSchema | None:
        return type(self)._store.get(name)

    def get_or_create(self, name: str) -> RoleSchema:
        store = type(self)._store
        if name not in store:
            store[name] = RoleSchema(id=uuid4(), name=name)
        return store[name]


class FakeIdentityContext:
    """Identity data context backed by the in-memory repositories."""

    def __init__(self, session: Any = None) -> None:
        self.session = session
        self.users = FakeUserRepository(session)
        self.roles = FakeRoleRepository(session)


class IdentityStore:
    """Helpers for seeding users into the fake identity context."""

    def __init__(self) -> None:
        self.context = FakeIdentityContext()

    def add_user(
        self,
        username: str,
        *,
        roles: Iterable[str] = (),
        claims: Iterable[tuple[str, str]] = (),
    ) -> UserSchema:
        user = UserSchema(
            id=uuid4(),
            username=username,
            password_hash=get_auth_service().hash_password(TEST_PASSWORD),
        )
        for role_name in roles:
            user.roles.append(self.context.roles.get_or_create(role_name))
        for claim_type, claim_value in claims:
            user.claims.append(
                UserClaimSchema(claim_type=claim_type, claim_value=claim_value)
            )
        return self.context.users.add(user)

    def token_for(self, user: UserSchema) -> str:
        return get_auth_service().issue_token(user)

    def headers_for(self, user: UserSchema) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token_for(user)}"}


@pytest.fixture(autouse=True)
def reset_repo() -> Iterator[None]:
    FakeUserRepository.reset()
    FakeRoleRepository.reset()
    yield
    FakeUserRepository.reset()
    FakeRoleRepository.reset()


@pytest.fixture
def identity_store() -> IdentityStore:
    return IdentityStore()


@pytest.fixture
def client(identity_store: IdentityStore) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_identity_context] = lambda: identity_store.context
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
