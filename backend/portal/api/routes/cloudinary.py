"""Cloudinary Routes — public sermon media listing.

Invariants:
    - Answers only 200 or 500; every failure (unconfigured, upstream error)
      is 500 with an empty sermons list, never partial data
    - limit never fails validation: non-numeric falls back to 100, out of
      range is clamped to 1..500
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from portal.api.dependencies import get_cloudinary
from portal.api.guard import GuardedRoute
from portal.core.errors import UpstreamServiceError
from portal.infrastructure.cloudinary import CloudinaryClient

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/cloudinary", tags=["media"], route_class=GuardedRoute,
)

DEFAULT_LIMIT = 100
MAX_LIMIT = 500
FETCH_FAILED = "Failed to fetch sermons"


def clamp_limit(raw: str | None) -> int:
    try:
        limit = int(raw) if raw is not None else DEFAULT_LIMIT
    except ValueError:
        limit = DEFAULT_LIMIT
    return max(1, min(limit, MAX_LIMIT))


def _failed() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": FETCH_FAILED, "sermons": []},
    )


@router.get("/sermons")
async def list_sermons(
    limit: str | None = None,
    client: CloudinaryClient | None = Depends(get_cloudinary),
):
    if client is None:
        logger.error("Sermon listing requested but Cloudinary is not configured")
        return _failed()
    try:
        sermons = await client.get_sermon_media(max_results=clamp_limit(limit))
    except UpstreamServiceError as e:
        logger.error(
            f"Sermon listing failed: {e.message}",
            extra={"service": e.service, "error_code": e.code},
        )
        return _failed()
    return {"success": True, "sermons": sermons, "count": len(sermons)}
