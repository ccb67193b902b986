"""Member Routes — admin-only member directory."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.guard import GuardedRoute, require_admin
from portal.infrastructure.auth import SessionUser
from portal.infrastructure.database import get_db
from portal.services.members import list_directory

router = APIRouter(
    prefix="/api/members", tags=["members"], route_class=GuardedRoute,
)


@router.get("/directory")
async def member_directory(
    user: SessionUser = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Active members with directory fields only."""
    members = await list_directory(db)
    return {"success": True, "members": members}
