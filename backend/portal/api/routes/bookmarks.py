"""Bookmark Routes — the session user's saved sermons, videos and posts.

Invariants:
    - Every endpoint requires a session; queries are scoped to session.user.id
    - GET /check with no ids answers {} without a database query
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.guard import GuardedRoute, require_session
from portal.core.domain_types import ResourceType
from portal.infrastructure.auth import SessionUser
from portal.infrastructure.database import get_db
from portal.schemas.bookmark import BookmarkCreate, parse_resource_ids
from portal.services import bookmarks as bookmark_service

router = APIRouter(
    prefix="/api/bookmarks", tags=["bookmarks"], route_class=GuardedRoute,
)


@router.get("/check")
async def check_bookmarks(
    resource_ids: str | None = Query(None, alias="resourceIds"),
    user: SessionUser = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    """Bulk bookmark status for a comma-separated list of resource ids."""
    bookmarked = await bookmark_service.check_bookmarks(
        db, user.id, parse_resource_ids(resource_ids),
    )
    return {"success": True, "bookmarked": bookmarked}


@router.get("")
async def list_bookmarks(
    user: SessionUser = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    bookmarks = await bookmark_service.list_bookmarks(db, user.id)
    return {"success": True, "bookmarks": [b.to_dict() for b in bookmarks]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    body: BookmarkCreate,
    user: SessionUser = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    bookmark = await bookmark_service.create_bookmark(db, user.id, body)
    return {"success": True, "bookmark": bookmark.to_dict()}


@router.delete("")
async def delete_bookmark(
    resource_id: str = Query(..., alias="resourceId", min_length=1),
    resource_type: ResourceType = Query(..., alias="resourceType"),
    user: SessionUser = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    await bookmark_service.delete_bookmark(
        db, user.id, resource_type.value, resource_id.strip(),
    )
    return {"success": True, "message": "Bookmark removed successfully"}
