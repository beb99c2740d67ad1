"""Identity data context bundling the identity repositories."""

from __future__ import annotations

from sqlalchemy.orm import Session

from webapi_backend.database.repositories import RoleRepository, UserRepository


class IdentityDataContext:
    """Typed handle over the users, roles and claims tables.

    The context owns no queries; it only binds the repositories to one
    session so callers share a single unit of work.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.roles = RoleRepository(session)
