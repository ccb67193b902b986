"""Bookmark ORM — a member's saved reference to a sermon, video or post.

Invariants:
    - At most one bookmark per (user_id, resource_type, resource_id)
    - Existence of the row is the only meaning of "bookmarked"
    - Deleted with the owning user (ON DELETE CASCADE)
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, JSON, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from portal.db.base import Base, utcnow


class Bookmark(Base):
    __tablename__ = "bookmarks"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "resource_type", "resource_id",
            name="uq_bookmarks_user_resource",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    resource_type: Mapped[str] = mapped_column(String(20), nullable=False)
    resource_id: Mapped[str] = mapped_column(String(255), nullable=False)
    resource_title: Mapped[str] = mapped_column(String(500), nullable=False)
    resource_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    resource_thumbnail: Mapped[str | None] = mapped_column(Text, nullable=True)
    resource_metadata: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "userId": str(self.user_id),
            "resourceType": self.resource_type,
            "resourceId": self.resource_id,
            "resourceTitle": self.resource_title,
            "resourceUrl": self.resource_url,
            "resourceThumbnail": self.resource_thumbnail,
            "resourceMetadata": self.resource_metadata or {},
            "createdAt": self.created_at.isoformat(),
        }
