"""User database schema."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, func
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webapi_backend.database.base import BaseSchema
from webapi_backend.database.schemas.claim import ROLE_CLAIM_TYPE, UserClaimSchema

if TYPE_CHECKING:
    from webapi_backend.database.schemas.role import RoleSchema


user_roles = Table(
    "user_roles",
    BaseSchema.metadata,
    Column(
        "user_id",
        PGUUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        PGUUID(as_uuid=True),
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class UserSchema(BaseSchema):
    """SQLAlchemy model for identity users."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True), primary_key=True, default=uuid4
    )
    username: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    roles: Mapped[list[RoleSchema]] = relationship(
        secondary=user_roles, back_populates="users", lazy="selectin"
    )
    claims: Mapped[list[UserClaimSchema]] = relationship(
        back_populates="user", cascade="all, delete-orphan", lazy="selectin"
    )

    def effective_roles(self) -> frozenset[str]:
        """Role memberships plus the values of ``role`` claims."""

        roles = {role.name for role in self.roles}
        roles.update(
            claim.claim_value
            for claim in self.claims
            if claim.claim_type == ROLE_CLAIM_TYPE
        )
        return frozenset(roles)
