"""Role database schema."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import String
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webapi_backend.database.base import BaseSchema
from webapi_backend.database.schemas.user import user_roles

if TYPE_CHECKING:
    from webapi_backend.database.schemas.user import UserSchema


class RoleSchema(BaseSchema):
    """Named role that users can be members of."""

    __tablename__ = "roles"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True), primary_key=True, default=uuid4
    )
    name: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )

    users: Mapped[list[UserSchema]] = relationship(
        secondary=user_roles, back_populates="roles"
    )
