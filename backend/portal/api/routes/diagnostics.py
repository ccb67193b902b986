"""Diagnostics Routes — database connectivity probe.

Invariants:
    - The probe reads at most one row and never writes
    - Failure answers 500 without exposing driver messages
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.guard import GuardedRoute
from portal.infrastructure.database import get_db
from portal.services.members import sample_user_count

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["diagnostics"], route_class=GuardedRoute)


@router.get("/test-db")
async def test_db(db: AsyncSession = Depends(get_db)):
    try:
        user_count = await sample_user_count(db)
    except SQLAlchemyError as e:
        logger.error(f"Database probe failed: {e}", extra={"endpoint": "/api/test-db"})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Database connection failed"},
        )
    return {
        "success": True,
        "message": "Database connection successful",
        "userCount": user_count,
    }
