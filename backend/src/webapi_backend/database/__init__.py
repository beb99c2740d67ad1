"""Database connectivity helpers and the identity data context."""

from webapi_backend.database.base import BaseSchema
from webapi_backend.database.context import IdentityDataContext
from webapi_backend.database.dependencies import (
    get_database,
    get_identity_context,
    get_session,
)
from webapi_backend.database.repositories import RoleRepository, UserRepository
from webapi_backend.database.schemas import (
    ROLE_CLAIM_TYPE,
    RoleSchema,
    UserClaimSchema,
    UserSchema,
)
from webapi_backend.database.service import DatabaseService
from webapi_backend.settings import BackendSettings, get_settings

__all__ = [
    "ROLE_CLAIM_TYPE",
    "BaseSchema",
    "BackendSettings",
    "DatabaseService",
    "IdentityDataContext",
    "RoleRepository",
    "RoleSchema",
    "UserClaimSchema",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_identity_context",
    "get_session",
    "get_settings",
]
