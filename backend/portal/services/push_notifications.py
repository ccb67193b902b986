"""Push Notification Operations — subscription bookkeeping and admin broadcast.

Invariants:
    - A browser endpoint belongs to at most one row; re-subscribing moves it
      to the current user and refreshes its keys
    - Saving a subscription turns push_enabled on for that user
    - Broadcast skips users whose preferences reject the type or who are in
      quiet hours; a user without a preference row receives everything
    - Subscriptions answered with 404/410 are deleted during broadcast
    - One failing delivery never aborts a broadcast; the rest are still sent
      and the counts and cleanups are committed
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.domain_types import (
    ADMIN_ROLES, NotificationType, PushAudience, UserRole,
)
from portal.db.base import utcnow
from portal.infrastructure.web_push import PushOutcome, WebPushSender
from portal.models.notification_preference import NotificationPreference
from portal.models.push_subscription import PushSubscription
from portal.models.user import User
from portal.schemas.push import BrowserSubscription

logger = logging.getLogger(__name__)


@dataclass
class BroadcastResult:
    sent: int = 0
    failed: int = 0
    skipped: int = 0
    removed: int = 0


class PushNotificationService:
    """Push subscription persistence and delivery."""

    def __init__(self, db: AsyncSession, sender: WebPushSender | None = None):
        self.db = db
        self.sender = sender

    async def save_subscription(
        self,
        user_id: UUID,
        subscription: BrowserSubscription,
        user_agent: str | None = None,
    ) -> None:
        result = await self.db.execute(
            select(PushSubscription)
            .where(PushSubscription.endpoint == subscription.endpoint)
            .limit(1),
        )
        existing = result.scalar_one_or_none()
        if existing:
            existing.user_id = user_id
            existing.p256dh = subscription.keys.p256dh
            existing.auth = subscription.keys.auth
            existing.user_agent = user_agent
            existing.last_used = utcnow()
        else:
            self.db.add(PushSubscription(
                user_id=user_id,
                endpoint=subscription.endpoint,
                p256dh=subscription.keys.p256dh,
                auth=subscription.keys.auth,
                user_agent=user_agent,
            ))

        pref_result = await self.db.execute(
            select(NotificationPreference)
            .where(NotificationPreference.user_id == user_id),
        )
        preference = pref_result.scalar_one_or_none()
        if preference:
            preference.push_enabled = True
        else:
            self.db.add(NotificationPreference(user_id=user_id, push_enabled=True))

        await self.db.commit()
        logger.info(
            "Push subscription saved",
            extra={"user_id": str(user_id), "endpoint": subscription.endpoint[:80]},
        )

    async def remove_subscription(self, user_id: UUID, endpoint: str) -> int:
        """Delete the user's subscription for endpoint; returns rows removed."""
        result = await self.db.execute(
            delete(PushSubscription)
            .where(PushSubscription.user_id == user_id)
            .where(PushSubscription.endpoint == endpoint),
        )
        await self.db.commit()
        logger.info(
            f"Push subscription removed ({result.rowcount} row(s))",
            extra={"user_id": str(user_id)},
        )
        return result.rowcount or 0

    async def broadcast(
        self,
        payload: dict,
        audience: PushAudience = PushAudience.ALL,
        notification_type: NotificationType | None = None,
        now: datetime | None = None,
    ) -> BroadcastResult:
        now = now or datetime.now()
        now_hhmm = now.strftime("%H:%M")
        query = (
            select(PushSubscription, NotificationPreference)
            .join(User, User.id == PushSubscription.user_id)
            .outerjoin(
                NotificationPreference,
                NotificationPreference.user_id == PushSubscription.user_id,
            )
            .where(User.is_active.is_(True))
        )
        if audience is PushAudience.ADMIN:
            query = query.where(User.role.in_([r.value for r in ADMIN_ROLES]))
        elif audience is PushAudience.MEMBERS:
            query = query.where(User.role == UserRole.MEMBER.value)

        rows = (await self.db.execute(query)).all()
        outcome = BroadcastResult()
        for subscription, preference in rows:
            if preference and (
                not preference.allows(notification_type)
                or preference.in_quiet_hours(now_hhmm)
            ):
                outcome.skipped += 1
                continue

            result = await self._deliver(subscription, payload)
            if result.delivered:
                subscription.last_used = utcnow()
                outcome.sent += 1
                continue

            outcome.failed += 1
            if result.gone:
                await self.db.execute(
                    delete(PushSubscription)
                    .where(PushSubscription.id == subscription.id),
                )
                outcome.removed += 1

        await self.db.commit()
        logger.info(
            f"Push broadcast: {outcome.sent} sent, {outcome.failed} failed, "
            f"{outcome.skipped} skipped, {outcome.removed} removed",
        )
        return outcome

    async def _deliver(self, subscription: PushSubscription, payload: dict) -> PushOutcome:
        """One delivery attempt; an unexpected sender error counts as a failure."""
        try:
            return await self.sender.send(subscription.to_webpush_info(), payload)
        except Exception:
            logger.exception(
                "Push delivery raised",
                extra={"service": "webpush", "user_id": str(subscription.user_id)},
            )
            return PushOutcome(delivered=False)
