"""Bookmark Schemas — create payload and comma-separated id parsing.

Invariants:
    - resource_type, resource_id and resource_title are required and non-blank
    - parse_resource_ids drops empty segments and duplicates, keeping first-seen order
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from portal.core.domain_types import ResourceType
from portal.schemas.validators import strip_optional, strip_required


class BookmarkCreate(BaseModel):
    """POST /api/bookmarks body (camelCase on the wire)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resource_type: ResourceType
    resource_id: str = Field(max_length=255)
    resource_title: str = Field(max_length=500)
    resource_url: str | None = None
    resource_thumbnail: str | None = None
    resource_metadata: dict = Field(default_factory=dict)

    @field_validator("resource_id", "resource_title")
    @classmethod
    def required_text(cls, v: str, info) -> str:
        return strip_required(v, info.field_name)

    @field_validator("resource_url", "resource_thumbnail")
    @classmethod
    def optional_text(cls, v: str | None) -> str | None:
        return strip_optional(v)


def parse_resource_ids(raw: str | None) -> list[str]:
    """Split "a, b,,a" into ["a", "b"]."""
    if not raw:
        return []
    seen: dict[str, None] = {}
    for part in raw.split(","):
        part = part.strip()
        if part:
            seen.setdefault(part, None)
    return list(seen)
