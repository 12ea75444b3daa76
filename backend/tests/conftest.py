"""
Noteful API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Points DATABASE_URL at a throwaway SQLite file (aiosqlite driver)
       BEFORE any noteful module is imported, so the module-level engine is
       built against it.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── db_schema:       fresh tables for one test, dropped afterwards
    ├── seeded_db:       db_schema + the fixture folders/tags/notes
    └── test_client:     HTTPX AsyncClient wired to the ASGI app
"""

import os
import tempfile

# Must run before `noteful.config` is imported anywhere
_TEST_DIR = tempfile.mkdtemp(prefix="noteful_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["API_PREFIX"] = "/api"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_note(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = None
            with pytest.raises(NotFoundError):
                await note_service.get_note(mock_db_session, note_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_schema():
    """Create every table, yield, then drop them and close pooled connections."""
    from noteful.database import create_schema, dispose_engine, drop_schema

    await drop_schema()
    await create_schema()
    yield
    await drop_schema()
    # Connections are bound to this test's event loop
    await dispose_engine()


@pytest_asyncio.fixture
async def seeded_db(db_schema):
    """Load noteful.seed_data into the fresh schema."""
    from noteful.database import async_session_factory
    from noteful.seed import insert_seed_data

    async with async_session_factory() as session:
        counts = await insert_seed_data(session)
        await session.commit()
    return counts


@pytest_asyncio.fixture
async def db_session(seeded_db):
    """A separate session for asserting on database state after API calls."""
    from noteful.database import async_session_factory

    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(seeded_db):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list_notes(test_client):
            response = await test_client.get("/api/notes")
            assert response.status_code == 200
    """
    from noteful.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
