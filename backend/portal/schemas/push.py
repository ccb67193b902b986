"""Push Schemas — browser subscription payloads and admin broadcast request."""

from pydantic import BaseModel, Field, field_validator

from portal.core.domain_types import NotificationType, PushAudience
from portal.schemas.validators import strip_optional, strip_required


class SubscriptionKeys(BaseModel):
    p256dh: str = Field(min_length=1)
    auth: str = Field(min_length=1)


class BrowserSubscription(BaseModel):
    endpoint: str
    keys: SubscriptionKeys

    @field_validator("endpoint")
    @classmethod
    def strip_endpoint(cls, v: str) -> str:
        return strip_required(v, "endpoint")


class SubscribeRequest(BaseModel):
    """POST /api/notifications/push/subscribe body."""
    subscription: BrowserSubscription


class UnsubscribeRequest(BaseModel):
    """POST /api/notifications/push/unsubscribe body."""
    endpoint: str

    @field_validator("endpoint")
    @classmethod
    def strip_endpoint(cls, v: str) -> str:
        return strip_required(v, "endpoint")


class PushBroadcast(BaseModel):
    """POST /api/notifications/push/send body (admin only)."""
    title: str = Field(max_length=200)
    body: str = Field(max_length=2000)
    url: str | None = None
    audience: PushAudience = PushAudience.ALL
    type: NotificationType | None = None

    @field_validator("title", "body")
    @classmethod
    def required_text(cls, v: str, info) -> str:
        return strip_required(v, info.field_name)

    @field_validator("url")
    @classmethod
    def optional_url(cls, v: str | None) -> str | None:
        return strip_optional(v)

    def to_payload(self) -> dict:
        """Notification payload delivered to the service worker."""
        data: dict = {}
        if self.url:
            data["url"] = self.url
        if self.type:
            data["type"] = self.type.value
        return {
            "title": self.title,
            "body": self.body,
            "icon": "/icon-192x192.png",
            "badge": "/badge-72x72.png",
            "tag": self.type.value if self.type else "general",
            "data": data,
        }
