"""Bookmark Operations — list, create, delete and bulk-check a member's bookmarks.

Invariants:
    - Every query is scoped by the session user's id
    - check_bookmarks returns exactly one entry per requested id
    - check_bookmarks with no ids returns {} without touching the store
    - A duplicate create raises ConflictError, including when two requests race
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.errors import ConflictError, ResourceNotFoundError
from portal.models.bookmark import Bookmark
from portal.schemas.bookmark import BookmarkCreate

logger = logging.getLogger(__name__)


async def list_bookmarks(db: AsyncSession, user_id: UUID) -> list[Bookmark]:
    result = await db.execute(
        select(Bookmark)
        .where(Bookmark.user_id == user_id)
        .order_by(Bookmark.created_at.desc()),
    )
    return list(result.scalars().all())


async def check_bookmarks(
    db: AsyncSession, user_id: UUID, resource_ids: list[str],
) -> dict[str, bool]:
    """Map each requested resource id to whether the user bookmarked it."""
    if not resource_ids:
        return {}
    result = await db.execute(
        select(Bookmark.resource_id)
        .where(Bookmark.user_id == user_id)
        .where(Bookmark.resource_id.in_(resource_ids)),
    )
    found = set(result.scalars().all())
    return {resource_id: resource_id in found for resource_id in resource_ids}


async def create_bookmark(
    db: AsyncSession, user_id: UUID, body: BookmarkCreate,
) -> Bookmark:
    existing = await db.execute(
        select(Bookmark.id)
        .where(Bookmark.user_id == user_id)
        .where(Bookmark.resource_type == body.resource_type.value)
        .where(Bookmark.resource_id == body.resource_id)
        .limit(1),
    )
    if existing.scalar_one_or_none() is not None:
        raise ConflictError("Bookmark already exists")

    bookmark = Bookmark(
        user_id=user_id,
        resource_type=body.resource_type.value,
        resource_id=body.resource_id,
        resource_title=body.resource_title,
        resource_url=body.resource_url,
        resource_thumbnail=body.resource_thumbnail,
        resource_metadata=body.resource_metadata,
    )
    db.add(bookmark)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Bookmark already exists")
    await db.refresh(bookmark)
    logger.info(
        f"Bookmark created for {body.resource_type.value}:{body.resource_id}",
        extra={"user_id": str(user_id)},
    )
    return bookmark


async def delete_bookmark(
    db: AsyncSession, user_id: UUID, resource_type: str, resource_id: str,
) -> None:
    result = await db.execute(
        delete(Bookmark)
        .where(Bookmark.user_id == user_id)
        .where(Bookmark.resource_type == resource_type)
        .where(Bookmark.resource_id == resource_id),
    )
    if not result.rowcount:
        await db.rollback()
        raise ResourceNotFoundError("Bookmark")
    await db.commit()
