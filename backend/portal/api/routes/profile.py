"""Profile Routes — the session user's own profile.

Invariants:
    - A blank name is rejected with 400 before any write
    - The password hash never appears in a response
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.guard import GuardedRoute, require_session
from portal.infrastructure.auth import SessionUser
from portal.infrastructure.database import get_db
from portal.schemas.profile import ProfileUpdate
from portal.services import profile as profile_service

router = APIRouter(
    prefix="/api/profile", tags=["profile"], route_class=GuardedRoute,
)


@router.get("/update")
async def get_profile(
    user: SessionUser = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    profile = await profile_service.get_profile(db, user.id)
    return {"success": True, "profile": profile.to_profile()}


@router.post("/update")
async def update_profile(
    body: ProfileUpdate,
    user: SessionUser = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    await profile_service.update_profile(db, user.id, body)
    return {"success": True, "message": "Profile updated successfully"}
