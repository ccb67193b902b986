"""Service test fixtures — async DB and seeded members.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Services receive the session directly; no HTTP layer involved
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from portal.db.base import Base
from portal.models.user import User


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
def make_user(test_db):
    """Insert a user; fields override the member defaults."""
    counter = iter(range(1, 1000))

    async def _make(**fields) -> User:
        n = next(counter)
        values = {"email": f"user{n}@example.com", "name": f"User {n}", "role": "member"}
        values.update(fields)
        user = User(**values)
        test_db.add(user)
        await test_db.commit()
        await test_db.refresh(user)
        return user

    return _make
