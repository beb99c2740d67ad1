"""Role-based authorization primitives.

An :class:`Identity` is the authenticated caller as seen by the handlers. An
:class:`Authorizer` decides whether that identity may reach an endpoint that
requires a set of roles. Endpoints never inspect roles themselves; they depend
on :func:`webapi_backend.api.dependencies.require_roles`.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from webapi_backend.database import UserSchema


@dataclass(frozen=True, slots=True)
class Identity:
    """Authenticated caller with its effective roles."""

    user_id: UUID
    username: str
    roles: frozenset[str]

    @classmethod
    def from_user(cls, user: UserSchema) -> Identity:
        return cls(
            user_id=user.id, username=user.username, roles=user.effective_roles()
        )

    def is_in_role(self, role: str) -> bool:
        return role in self.roles


class Authorizer(Protocol):
    """Decides access for an identity against required roles."""

    def authorize(self, identity: Identity, required_roles: Collection[str]) -> bool:
        ...


class RoleAuthorizer:
    """Grants access when the identity holds any of the required roles.

    An empty requirement only asks for an authenticated identity.
    """

    def authorize(self, identity: Identity, required_roles: Collection[str]) -> bool:
        if not required_roles:
            return True
        return any(identity.is_in_role(role) for role in required_roles)


__all__ = ["Authorizer", "Identity", "RoleAuthorizer"]
