"""User ORM — member identity, profile fields and authorization attributes.

Invariants:
    - email is unique and non-nullable
    - hashed_password is never serialized by the API (see to_profile)
    - role is one of UserRole values; defaults to member
    - Rows are created by registration (external) and never deleted here
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from portal.core.domain_types import UserRole
from portal.db.base import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.MEMBER.value,
    )
    ministry_role: Mapped[str | None] = mapped_column(String(50), nullable=True)
    hashed_password: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    birthday: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    interests: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    membership_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    def to_profile(self) -> dict:
        """Public profile fields — everything except the password hash."""
        return {
            "id": str(self.id),
            "email": self.email,
            "name": self.name,
            "image": self.image,
            "role": self.role,
            "ministryRole": self.ministry_role,
            "phone": self.phone,
            "address": self.address,
            "birthday": _iso(self.birthday),
            "interests": self.interests,
            "bio": self.bio,
            "membershipDate": _iso(self.membership_date),
            "isActive": self.is_active,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
