"""User claim database schema."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webapi_backend.database.base import BaseSchema

if TYPE_CHECKING:
    from webapi_backend.database.schemas.user import UserSchema

ROLE_CLAIM_TYPE = "role"


class UserClaimSchema(BaseSchema):
    """Free-form ``(type, value)`` claim attached to a user."""

    __tablename__ = "user_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    claim_type: Mapped[str] = mapped_column(String(255), nullable=False)
    claim_value: Mapped[str] = mapped_column(String(1024), nullable=False)

    user: Mapped[UserSchema] = relationship(back_populates="claims")
