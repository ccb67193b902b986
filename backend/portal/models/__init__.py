"""ORM Models — SQLAlchemy declarative models for portal entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is owned by the auth provider; this codebase only updates profile fields

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from portal.models.user import User  # noqa: F401
from portal.models.bookmark import Bookmark  # noqa: F401
from portal.models.push_subscription import PushSubscription  # noqa: F401
from portal.models.notification_preference import NotificationPreference  # noqa: F401
