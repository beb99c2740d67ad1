"""SQLAlchemy schemas for the identity store."""

from webapi_backend.database.schemas.claim import ROLE_CLAIM_TYPE, UserClaimSchema
from webapi_backend.database.schemas.role import RoleSchema
from webapi_backend.database.schemas.user import UserSchema, user_roles

__all__ = [
    "ROLE_CLAIM_TYPE",
    "RoleSchema",
    "UserClaimSchema",
    "UserSchema",
    "user_roles",
]
