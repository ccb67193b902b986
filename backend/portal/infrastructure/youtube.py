"""YouTube Data API v3 Client — channel lookup and video listings.

Invariants:
    - get_channel_info returns None when the handle matches no channel
    - Video listings are enriched with contentDetails/statistics in one extra call
    - Leading "@" is stripped from handles before lookup
"""

import re

from portal.infrastructure.http_client import ProviderClient

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"

_ISO_DURATION = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


class YouTubeClient(ProviderClient):
    service_name = "YouTube"

    def __init__(self, api_key: str, base_url: str = YOUTUBE_API_BASE, **kwargs):
        super().__init__(base_url, **kwargs)
        self.api_key = api_key

    async def _get(self, endpoint: str, params: dict) -> dict:
        return await self.request_json(
            "GET", f"/{endpoint}", params={"key": self.api_key, **params},
        )

    async def get_channel_info(self, handle: str) -> dict | None:
        data = await self._get("channels", {
            "part": "snippet,statistics",
            "forHandle": handle.lstrip("@"),
            "maxResults": "1",
        })
        items = data.get("items") or []
        if not items:
            return None
        channel = items[0]
        snippet = channel.get("snippet", {})
        statistics = channel.get("statistics") or {}
        return {
            "id": channel["id"],
            "title": snippet.get("title", ""),
            "description": snippet.get("description", ""),
            "thumbnails": snippet.get("thumbnails", {}),
            "subscriberCount": statistics.get("subscriberCount"),
            "videoCount": statistics.get("videoCount"),
            "viewCount": statistics.get("viewCount"),
        }

    async def get_playlist_videos(self, playlist_id: str, max_results: int = 50) -> list[dict]:
        data = await self._get("playlistItems", {
            "part": "snippet",
            "playlistId": playlist_id,
            "maxResults": str(max_results),
        })
        video_ids = [
            item["snippet"]["resourceId"]["videoId"]
            for item in data.get("items") or []
            if item.get("snippet", {}).get("resourceId", {}).get("videoId")
        ]
        return await self._video_details(video_ids)

    async def get_channel_videos(self, channel_id: str, max_results: int = 50) -> list[dict]:
        data = await self._get("search", {
            "part": "snippet",
            "channelId": channel_id,
            "type": "video",
            "order": "date",
            "maxResults": str(max_results),
        })
        video_ids = [
            item["id"]["videoId"]
            for item in data.get("items") or []
            if item.get("id", {}).get("videoId")
        ]
        return await self._video_details(video_ids)

    async def _video_details(self, video_ids: list[str]) -> list[dict]:
        if not video_ids:
            return []
        data = await self._get("videos", {
            "part": "snippet,contentDetails,statistics",
            "id": ",".join(video_ids),
        })
        return [_format_video(item) for item in data.get("items") or []]


def _format_video(item: dict) -> dict:
    snippet = item.get("snippet", {})
    thumbnails = snippet.get("thumbnails", {})
    raw_duration = (item.get("contentDetails") or {}).get("duration")
    statistics = item.get("statistics") or {}
    raw_views = statistics.get("viewCount")
    video_id = item["id"]
    thumbnail = next(
        (thumbnails[size]["url"] for size in ("high", "medium", "default") if size in thumbnails),
        None,
    )
    return {
        "id": video_id,
        "title": snippet.get("title", ""),
        "description": snippet.get("description", ""),
        "publishedAt": snippet.get("publishedAt"),
        "thumbnail": thumbnail,
        "thumbnails": thumbnails,
        "channelTitle": snippet.get("channelTitle", ""),
        "duration": format_duration(raw_duration) if raw_duration else "Unknown",
        "rawDuration": raw_duration,
        "viewCount": format_view_count(raw_views) if raw_views else "0",
        "rawViewCount": raw_views,
        "likeCount": statistics.get("likeCount"),
        "tags": snippet.get("tags") or [],
        "youtubeUrl": f"https://www.youtube.com/watch?v={video_id}",
        "embedUrl": f"https://www.youtube.com/embed/{video_id}",
    }


def format_duration(iso_duration: str) -> str:
    """PT1H2M3S -> 1:02:03, PT4M5S -> 4:05."""
    match = _ISO_DURATION.fullmatch(iso_duration)
    if not match:
        return "0:00"
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_view_count(count: str) -> str:
    num = int(count)
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)
