"""YouTube Routes — channel lookup and video listings for the media pages.

Invariants:
    - Missing input answers 400 before the provider configuration is checked
    - An unknown channel handle answers 404
"""

from fastapi import APIRouter, Depends, Query

from portal.api.dependencies import get_youtube
from portal.api.guard import GuardedRoute
from portal.core.errors import (
    RequestValidationFailed, ResourceNotFoundError, ServiceUnavailableError,
)
from portal.infrastructure.youtube import YouTubeClient

router = APIRouter(
    prefix="/api/youtube", tags=["youtube"], route_class=GuardedRoute,
)


@router.get("/channel")
async def channel_info(
    handle: str | None = Query(None),
    client: YouTubeClient | None = Depends(get_youtube),
):
    handle = (handle or "").strip()
    if not handle:
        raise RequestValidationFailed("Channel handle is required", field="handle")
    if client is None:
        raise ServiceUnavailableError("YouTube API")
    channel = await client.get_channel_info(handle)
    if channel is None:
        raise ResourceNotFoundError("Channel")
    return {"success": True, "channel": channel}


@router.get("/videos")
async def list_videos(
    playlist_id: str | None = Query(None, alias="playlistId"),
    channel_id: str | None = Query(None, alias="channelId"),
    max_results: int = Query(50, alias="maxResults", ge=1, le=50),
    client: YouTubeClient | None = Depends(get_youtube),
):
    """Videos from a playlist, else from a channel's latest uploads."""
    playlist_id = (playlist_id or "").strip()
    channel_id = (channel_id or "").strip()
    if not playlist_id and not channel_id:
        raise RequestValidationFailed(
            "Either playlistId or channelId is required", field="playlistId",
        )
    if client is None:
        raise ServiceUnavailableError("YouTube API")

    if playlist_id:
        videos = await client.get_playlist_videos(playlist_id, max_results)
        source = "playlist"
    else:
        videos = await client.get_channel_videos(channel_id, max_results)
        source = "channel"
    return {"success": True, "videos": videos, "count": len(videos), "source": source}
