"""Repositories over the identity schemas."""

from webapi_backend.database.repositories.role import RoleRepository
from webapi_backend.database.repositories.user import UserRepository

__all__ = ["RoleRepository", "UserRepository"]
