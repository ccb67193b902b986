"""Domain Types — enums and value types shared by models, schemas and routes.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - has_admin_access is the single authorization predicate for admin routes

Design Decisions:
    - str Enums: serialize to JSON and store in String columns without converters
"""

from enum import Enum


class UserRole(str, Enum):
    """Portal roles, most privileged first."""
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MEMBER = "member"
    VISITOR = "visitor"


ADMIN_ROLES = frozenset({UserRole.SUPER_ADMIN, UserRole.ADMIN})


def has_admin_access(role: str | None) -> bool:
    """True for admin and super_admin roles."""
    try:
        return UserRole(role) in ADMIN_ROLES
    except ValueError:
        return False


class ResourceType(str, Enum):
    """Kinds of content a member can bookmark."""
    SERMON = "sermon"
    AUDIO_MESSAGE = "audio_message"
    VIDEO = "video"
    BLOG_POST = "blog_post"
    OTHER = "other"


class NotificationType(str, Enum):
    """Push notification categories — each maps to a preference flag."""
    ANNOUNCEMENT = "announcement"
    EVENT = "event"
    PRAYER_REQUEST = "prayer_request"
    SYSTEM = "system"
    ADMIN = "admin"


class PushAudience(str, Enum):
    """Who receives a broadcast push notification."""
    ALL = "all"
    MEMBERS = "members"
    ADMIN = "admin"
