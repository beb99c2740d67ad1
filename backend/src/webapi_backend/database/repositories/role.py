"""Repository helpers for working with roles."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from webapi_backend.database.schemas import RoleSchema


class RoleRepository:
    """Encapsulates persistence operations for :class:`RoleSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_name(self, name: str) -> RoleSchema | None:
        """Return role entity by its name."""
        stmt = select(RoleSchema).where(RoleSchema.name == name)
        return self._session.scalar(stmt)

    def get_or_create(self, name: str) -> RoleSchema:
        """Return the named role, inserting it first when missing."""
        role = self.get_by_name(name)
        if role is None:
            role = RoleSchema(name=name)
            self._session.add(role)
            self._session.flush()
        return role
