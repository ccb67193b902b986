"""NotificationPreference ORM — per-member push opt-ins and quiet hours.

Invariants:
    - At most one row per user (user_id unique)
    - A missing row means every push category is allowed
    - quiet_hours_start/end are "HH:MM" strings compared lexicographically;
      start is inclusive, end exclusive
    - A window whose start is after its end wraps past midnight; start == end
      is quiet all day
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from portal.core.domain_types import NotificationType
from portal.db.base import Base, utcnow


class NotificationPreference(Base):
    __tablename__ = "notification_preferences"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    push_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    push_announcements: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    push_events: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    push_prayer_requests: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    push_system_alerts: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    quiet_hours_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    quiet_hours_start: Mapped[str | None] = mapped_column(String(5), nullable=True)
    quiet_hours_end: Mapped[str | None] = mapped_column(String(5), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )

    def allows(self, notification_type: NotificationType | None) -> bool:
        """Whether this member accepts a push of the given type."""
        if not self.push_enabled:
            return False
        if notification_type is None:
            return True
        flag = {
            NotificationType.ANNOUNCEMENT: self.push_announcements,
            NotificationType.EVENT: self.push_events,
            NotificationType.PRAYER_REQUEST: self.push_prayer_requests,
            NotificationType.SYSTEM: self.push_system_alerts,
            NotificationType.ADMIN: self.push_system_alerts,
        }
        return flag[notification_type]

    def in_quiet_hours(self, now_hhmm: str) -> bool:
        if not (self.quiet_hours_enabled and self.quiet_hours_start and self.quiet_hours_end):
            return False
        start, end = self.quiet_hours_start, self.quiet_hours_end
        if start < end:
            return start <= now_hhmm < end
        return now_hhmm >= start or now_hhmm < end
