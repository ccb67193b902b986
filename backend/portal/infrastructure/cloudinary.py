"""Cloudinary Client — sermon media listing through the Admin Search API.

Invariants:
    - Only resources inside the configured sermon folder are returned, newest first
    - Missing context metadata falls back to values derived from the filename
"""

import re

from portal.infrastructure.http_client import ProviderClient

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"

DEFAULT_SERMON_DESCRIPTION = "A powerful message from our church family."


class CloudinaryClient(ProviderClient):
    service_name = "Cloudinary"

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        sermon_folder: str,
        base_url: str = CLOUDINARY_API_BASE,
        **kwargs,
    ):
        super().__init__(
            f"{base_url}/{cloud_name}", auth=(api_key, api_secret), **kwargs,
        )
        self.sermon_folder = sermon_folder

    async def get_sermon_media(self, max_results: int = 100) -> list[dict]:
        data = await self.request_json(
            "POST", "/resources/search",
            json={
                "expression": f"folder:{self.sermon_folder}",
                "sort_by": [{"created_at": "desc"}],
                "max_results": max_results,
                "with_field": ["context", "tags"],
            },
            public_message="Failed to fetch sermons",
        )
        return [to_sermon(resource) for resource in data.get("resources") or []]


def to_sermon(resource: dict) -> dict:
    custom = (resource.get("context") or {}).get("custom") or {}
    filename = resource.get("filename") or resource["public_id"].rsplit("/", 1)[-1]
    clean_title = re.sub(r"\.[^/.]+$", "", re.sub(r"[-_]", " ", filename))
    return {
        "id": resource["public_id"],
        "title": custom.get("title") or clean_title or "Sermon",
        "speaker": custom.get("speaker") or "Church Speaker",
        "date": custom.get("date") or resource.get("created_at"),
        "series": custom.get("series"),
        "description": custom.get("description") or DEFAULT_SERMON_DESCRIPTION,
        "thumbnail": resource.get("secure_url"),
        "videoUrl": custom.get("video_url"),
        "audioUrl": custom.get("audio_url"),
        "duration": custom.get("duration"),
        "tags": resource.get("tags") or ["sermon", "message"],
    }
