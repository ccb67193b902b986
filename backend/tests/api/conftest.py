"""API test fixtures — async DB, session tokens, fake providers and a test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db, get_session_verifier and get_providers are overridden per test
    - executed_statements records every SQL statement sent to the test engine

Design Decisions:
    - SQLite in-memory: PostgreSQL-specific features are not exercised by routes
    - Provider clients get httpx.MockTransport handlers instead of real network
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from portal.api.dependencies import Providers, get_providers
from portal.api.guard import get_session_verifier
from portal.db.base import Base
from portal.infrastructure.auth import SessionVerifier
from portal.infrastructure.database import get_db
from portal.main import app
from portal.models.user import User

TEST_SECRET = "api-test-secret"


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def executed_statements(test_engine):
    statements: list[str] = []

    @event.listens_for(test_engine.sync_engine, "before_cursor_execute")
    def _record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    return statements


@pytest.fixture
def verifier():
    return SessionVerifier(TEST_SECRET)


@pytest.fixture
def providers():
    return Providers()


@pytest.fixture
async def client(test_session_factory, verifier, providers):
    """FastAPI test client with DB, auth and provider dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_verifier] = lambda: verifier
    app.dependency_overrides[get_providers] = lambda: providers

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    await providers.aclose()


async def _add_user(test_db, **fields) -> User:
    user = User(**fields)
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def member(test_db):
    return await _add_user(
        test_db,
        email="member@example.com",
        name="Grace Member",
        role="member",
        phone="0801",
        hashed_password="$2b$12$not-a-real-hash",
        membership_date=datetime(2020, 5, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
async def admin(test_db):
    return await _add_user(
        test_db, email="admin@example.com", name="Admin User", role="admin",
    )


@pytest.fixture
async def inactive_member(test_db):
    return await _add_user(
        test_db, email="gone@example.com", name="Former Member",
        role="member", is_active=False,
    )


@pytest.fixture
def auth_headers(verifier):
    """Build a bearer header for a seeded user."""
    def _headers(user: User) -> dict:
        token = verifier.issue_token(
            user.id, role=user.role, email=user.email, name=user.name,
        )
        return {"Authorization": f"Bearer {token}"}
    return _headers
