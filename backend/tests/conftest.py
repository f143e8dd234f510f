"""
BlogHub Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The process-wide store is pointed at a throwaway SQLite file (via
       aiosqlite) before any bloghub module is imported; each API test gets
       freshly created tables and drops them afterwards.

Fixture Hierarchy:
    ├── mock_db_session: Mock async session for service unit tests
    ├── db_store:        Connected store with empty tables
    ├── insert:          Writes ORM documents straight to the store
    ├── client:          HTTPX AsyncClient with a bearer token
    ├── anon_client:     HTTPX AsyncClient without credentials
    ├── user / category: Documents created through the API
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any bloghub imports
_TEST_DIR = tempfile.mkdtemp(prefix="bloghub_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bloghub.database import Base, store
from bloghub.main import create_app
import bloghub.models  # noqa: F401  (registers every table on Base.metadata)

AUTH_HEADERS = {"Authorization": "Bearer test-token"}


# ══════════════════════════════════════════════════════════════════════════
# Unit-Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_missing_user(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = None
            ...
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Store & API Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_store():
    """Connects the store on this test's event loop and creates empty tables."""
    await store.connect()
    async with store.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield store

    async with store.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await store.dispose()


@pytest_asyncio.fixture
async def insert(db_store):
    """
    Returns a coroutine that persists ORM documents and returns them.

    Used where a test needs control over fields the API assigns itself,
    such as created_at.
    """
    async def _insert(*documents):
        async with db_store.session_factory() as session:
            session.add_all(documents)
            await session.commit()
        return documents

    return _insert


@pytest.fixture
def app():
    return create_app()


@pytest_asyncio.fixture
async def client(app, db_store):
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers=AUTH_HEADERS
    ) as c:
        yield c


@pytest_asyncio.fixture
async def anon_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def user(client):
    response = await client.post(
        "/api/users",
        json={"email": "ada@example.com", "username": "ada", "password": "s3cret"},
    )
    assert response.status_code == 201
    return response.json()["user"]


@pytest_asyncio.fixture
async def other_user(client):
    response = await client.post(
        "/api/users",
        json={"email": "bob@example.com", "username": "bob", "password": "hunter2"},
    )
    assert response.status_code == 201
    return response.json()["user"]


@pytest_asyncio.fixture
async def category(client, user):
    response = await client.post(
        "/api/categories",
        params={"userId": user["_id"]},
        json={"title": "Programming", "description": "Notes on code"},
    )
    assert response.status_code == 201
    return response.json()["category"]
