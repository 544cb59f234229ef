"""
QuickNotes: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── database:        Creates the schema in a temporary SQLite file, drops it after
    ├── db_session:      AsyncSession on that database (service-level tests)
    ├── mock_db_session: AsyncMock session (failure-path tests, no DB)
    ├── test_client:     HTTPX AsyncClient wired to the FastAPI app
    └── make_note:       Factory for NoteRead objects (client tests)
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any quicknotes import: settings and the engine are
# created at import time.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="quicknotes_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from quicknotes.database import (  # noqa: E402
    async_session_factory,
    create_tables,
    dispose_engine,
    drop_tables,
)
from quicknotes.schemas.note import NoteRead  # noqa: E402


@pytest_asyncio.fixture
async def database():
    """Fresh, empty notes table for one test."""
    await create_tables()
    yield
    await drop_tables()
    # Pooled connections must not outlive this test's event loop
    await dispose_engine()


@pytest_asyncio.fixture
async def db_session(database):
    """
    AsyncSession against the test database.

    Tests call `await db_session.commit()` where they need a committed
    state, just as get_db_session does at the end of a request.
    """
    async with async_session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        await note_service.list_notes(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient routed straight into the app (no server).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/notes")
    """
    from quicknotes.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_note():
    """
    Factory for NoteRead objects; each call is one minute newer than the last.

    Usage:
        note = make_note(1, "Title", "Body")
    """
    base = datetime(2026, 2, 12, 9, 0, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make(note_id: int, title: str = "Title", content: str = "Content") -> NoteRead:
        counter["n"] += 1
        stamp = base + timedelta(minutes=counter["n"])
        return NoteRead(
            id=note_id,
            title=title,
            content=content,
            created_at=stamp,
            updated_at=stamp,
        )

    return _make
