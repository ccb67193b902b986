"""Member Queries — admin directory and the store connectivity probe.

Invariants:
    - The directory lists active users only
    - Directory entries never include password hashes or audit timestamps
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.models.user import User

DIRECTORY_FIELDS = (
    "id", "name", "email", "phone", "address", "birthday", "interests",
    "bio", "image", "role", "ministryRole", "membershipDate",
)


async def list_directory(db: AsyncSession) -> list[dict]:
    result = await db.execute(
        select(User).where(User.is_active.is_(True)).order_by(User.name),
    )
    return [
        {key: profile[key] for key in DIRECTORY_FIELDS}
        for profile in (user.to_profile() for user in result.scalars().all())
    ]


async def sample_user_count(db: AsyncSession) -> int:
    """Read at most one user row; 0 or 1 proves the connection works."""
    result = await db.execute(select(User.id).limit(1))
    return len(result.all())
