"""Profile Operations — read and update the session user's own profile.

Invariants:
    - Only the session user's row is read or written
    - update_profile issues exactly one UPDATE; validation happens before it
    - image is written only when the client sent the field
"""

import logging
from datetime import datetime, time, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.errors import ResourceNotFoundError
from portal.db.base import utcnow
from portal.models.user import User
from portal.schemas.profile import ProfileUpdate

logger = logging.getLogger(__name__)


async def get_profile(db: AsyncSession, user_id: UUID) -> User:
    result = await db.execute(select(User).where(User.id == user_id).limit(1))
    user = result.scalar_one_or_none()
    if user is None:
        raise ResourceNotFoundError("User")
    return user


def build_profile_changes(body: ProfileUpdate) -> dict:
    """Column values for the UPDATE statement."""
    changes = {
        "name": body.name,
        "phone": body.phone,
        "address": body.address,
        "birthday": (
            datetime.combine(body.birthday, time.min, tzinfo=timezone.utc)
            if body.birthday else None
        ),
        "interests": body.interests,
        "bio": body.bio,
        "updated_at": utcnow(),
    }
    if body.image_provided:
        changes["image"] = body.image
    return changes


async def update_profile(
    db: AsyncSession, user_id: UUID, body: ProfileUpdate,
) -> None:
    result = await db.execute(
        update(User)
        .where(User.id == user_id)
        .values(**build_profile_changes(body)),
    )
    if not result.rowcount:
        await db.rollback()
        raise ResourceNotFoundError("User")
    await db.commit()
    logger.info("Profile updated", extra={"user_id": str(user_id)})
